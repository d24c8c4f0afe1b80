from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class Channel:
    """Snapshot of an open channel, amounts in BTC."""
    id: int
    channel_point: str
    node: str
    local_balance: Decimal
    capacity: Decimal = Decimal(0)
    remote_balance: Decimal = Decimal(0)
    local_reserved: Decimal = Decimal(0)
    status: str = 'active'

    def __post_init__(self):
        if not isinstance(self.local_balance, Decimal):
            raise TypeError(
                f"local balance must be a Decimal, got "
                f"{type(self.local_balance).__name__}")
        if self.local_balance < 0:
            raise ValueError(
                f"local balance of channel {self.channel_point} is negative: "
                f"{self.local_balance}")

    def __str__(self):
        return f"{self.id} ({self.channel_point}) {self.local_balance} BTC"


@dataclass
class ChannelPayment:
    id: int
    channel_point: str
    node: str
    amount: Decimal
    error: Optional[str] = None

    @classmethod
    def from_channel(cls, channel: Channel, amount: Decimal) -> 'ChannelPayment':
        return cls(
            id=channel.id,
            channel_point=channel.channel_point,
            node=channel.node,
            amount=amount,
        )

    def __str__(self):
        return f"{self.id} ({self.channel_point}): {self.amount} BTC"


@dataclass(frozen=True)
class Invoice:
    channel_point: str
    payment_request: str
    node_id: str


@dataclass(frozen=True)
class Limits:
    min_payment_amount: Decimal
    min_channel_capacity: Decimal = Decimal(0)
    channel_reserve_multiplier: Decimal = Decimal(1)


@dataclass
class PaymentResult:
    successful: List[ChannelPayment] = field(default_factory=list)
    errors: List[ChannelPayment] = field(default_factory=list)

    @property
    def amount_sent(self) -> Decimal:
        return sum((p.amount for p in self.successful), Decimal(0))


@dataclass(frozen=True)
class PaymentRecord:
    """A payment made by the node, amount in BTC."""
    node: str
    timestamp: datetime
    amount: Decimal
    payment_hash: str = ''

    def __str__(self):
        return f"{self.timestamp.isoformat()} {self.node}: {self.amount} BTC"
