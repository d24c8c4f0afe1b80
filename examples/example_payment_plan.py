from decimal import Decimal

from lndpay.lib.allocation import ChannelPaymentAllocator
from lndpay.lib.node import LndNode
from lndpay import settings

import logging.config
settings.set_lndpay_home_dir(create=True)
logging.config.dictConfig(settings.logger_config)
logger = logging.getLogger()

if __name__ == '__main__':
    allocator = ChannelPaymentAllocator(settings.DEFAULT_MIN_PAYMENT_AMOUNT)
    with LndNode() as node:
        channels = node.list_active_channels()
    for payment in allocator.fund_payment(Decimal('0.001'), channels):
        logger.info(payment)
