import os
from ast import literal_eval
import configparser
from decimal import Decimal
from pathlib import Path

from lndpay.lib.configure import check_or_create_configuration


def parse_env(key, default, _type=str):
    if _type in (str, Decimal):
        return _type(os.environ.get(key, default))
    return _type(literal_eval(os.environ.get(key, default)))

# -------- allocation --------
# number of fractional digits of BTC amounts, satoshi precision
ROUND_PRECISION = parse_env('LNDPAY_ROUND_PRECISION', '8', int)
# floor for a single channel payment, used when the settlement api doesn't
# report limits
DEFAULT_MIN_PAYMENT_AMOUNT = parse_env(
    'LNDPAY_DEFAULT_MIN_PAYMENT_AMOUNT', '0.00006', Decimal)

# -------- settlement api --------
# timeout of a single http request
REQUEST_TIMEOUT_SEC = parse_env('LNDPAY_REQUEST_TIMEOUT_SEC', '30', float)
# channel reserve multiplier, if not given by the settlement api
DEFAULT_CHANNEL_RESERVE_MULTIPLIER = parse_env(
    'LNDPAY_DEFAULT_CHANNEL_RESERVE_MULTIPLIER', '1', Decimal)

# -------- lnd --------
# timeout of a single grpc call
GRPC_TIMEOUT_SEC = parse_env('LNDPAY_GRPC_TIMEOUT_SEC', '5', float)
# timeout of a synchronous payment
PAYMENT_TIMEOUT_SEC = parse_env('LNDPAY_PAYMENT_TIMEOUT_SEC', '60', float)


logger_config = None
home_dir = None


def set_lndpay_home_dir(directory=None, create=False):
    """
    Sets the correct path to the lndpay home folder.

    :param directory: home folder, overwrites default
    :type directory: str
    :param create: create the folder and configuration if missing
    :type create: bool
    """
    global home_dir, logger_config

    if directory:
        home_dir = directory
    else:
        # determine home folder, prioritized by environment
        # variable LNDPAY_HOME
        environ_home = os.environ.get('LNDPAY_HOME')

        if environ_home:
            if not os.path.isabs(environ_home):
                raise ValueError(
                    f'Environment variable LNDPAY_HOME must be '
                    f'an absolute path. Current: "{environ_home}"')
            home_dir = environ_home
        else:
            user_home_dir = str(Path.home())
            home_dir = os.path.join(user_home_dir, '.lndpay')

    if create:
        check_or_create_configuration(home_dir)

    # logger settings, the console level can be set in the config
    logfile_path = os.path.join(home_dir, 'lndpay.log')
    config = read_config(config_path())
    loglevel = config.get('logging', 'loglevel', fallback='INFO').upper()

    logger_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'file': {
                'format': '[%(asctime)s %(levelname)s] %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S'
            },
            'standard': {
                'format': '%(message)s',
            },
        },
        'handlers': {
            'default': {
                'level': loglevel,
                'formatter': 'standard',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stdout',
            },
            'file': {
                'level': 'DEBUG',
                'formatter': 'file',
                'class': 'logging.FileHandler',
                'filename': logfile_path,
                'encoding': 'utf-8',
            },
        },
        'loggers': {
            '': {  # root logger
                'handlers': ['default', 'file'],
                'level': 'DEBUG',
                'propagate': True
            },
        }
    }


def read_config(config_path):
    config = configparser.ConfigParser()
    config.read(config_path)
    return config


def config_path():
    return os.path.join(home_dir, 'config.ini')


set_lndpay_home_dir()
