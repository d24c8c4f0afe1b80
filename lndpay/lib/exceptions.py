class AllocationError(Exception):
    pass


class InsufficientBalance(AllocationError):
    def __init__(self, total_local, amount):
        self.total_local = total_local
        self.amount = amount
        super().__init__(
            f"Open channels total local balance {total_local} is less than "
            f"amount to pay {amount}")


class NoTerminalChannelFound(AllocationError):
    def __init__(self, amount_left):
        self.amount_left = amount_left
        super().__init__(
            f"Unable to find last channel to distribute rest amount "
            f"{amount_left}")


class LastChannelInsufficientBalance(AllocationError):
    def __init__(self, local_balance, amount_left):
        self.local_balance = local_balance
        self.amount_left = amount_left
        super().__init__(
            f"Last channel local balance {local_balance} is less than left "
            f"amount {amount_left}")


class ShareExceedsChannelBalance(AllocationError):
    def __init__(self, channel_point, local_balance, share):
        self.channel_point = channel_point
        self.local_balance = local_balance
        self.share = share
        super().__init__(
            f"Share {share} exceeds local balance {local_balance} of channel "
            f"{channel_point}")


class PaymentError(Exception):
    pass


class AmountBelowMinimum(PaymentError):
    def __init__(self, amount, min_payment_amount):
        self.amount = amount
        self.min_payment_amount = min_payment_amount
        super().__init__(
            f"Amount {amount} should be greater or equal to min payment "
            f"amount {min_payment_amount}")


class FundChannelsError(PaymentError):
    """Allocation of a payment over the open channels failed."""
    def __init__(self, cause, min_payment_amount, funding_channels):
        self.cause = cause
        self.min_payment_amount = min_payment_amount
        self.funding_channels = funding_channels
        super().__init__(str(cause))


class ChannelNotFound(PaymentError):
    pass


class ForeignChannel(PaymentError):
    pass


class ChannelBalanceExceeded(PaymentError):
    def __init__(self, amount, local_balance, reserved):
        self.amount = amount
        self.local_balance = local_balance
        self.reserved = reserved
        super().__init__(
            f"Amount {amount} is greater than (local_balance {local_balance} "
            f"- reserved {reserved}) = {local_balance - reserved}")


class PaymentFailure(PaymentError):
    pass


class RPCError(Exception):
    pass


class SettlementAPIError(Exception):
    pass
