from decimal import Decimal

from lndpay.lib.node import LndNode
from lndpay.lib.payment import PaymentSender
from lndpay.lib.settlement import SettlementClient
from lndpay import settings

import logging.config
settings.set_lndpay_home_dir(create=True)
logging.config.dictConfig(settings.logger_config)
logger = logging.getLogger()

if __name__ == '__main__':
    with LndNode() as node:
        sender = PaymentSender(node, SettlementClient.from_config(node.config))
        result = sender.send(account_id=1, amount=Decimal('0.0005'))
    for payment in result.errors:
        logger.info(f"{payment.channel_point}: {payment.error}")
