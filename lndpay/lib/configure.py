import os
import configparser

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

this_file_path = os.path.dirname(os.path.realpath(__file__))


def check_or_create_configuration(home_dir):
    """
    Checks if lndpay configuration exists, otherwise creates configuration.

    Returns True if the configuration was newly created.

    :param home_dir: lndpay home directory
    :type home_dir: str
    :rtype: bool
    """
    config_path = os.path.join(home_dir, 'config.ini')

    if not os.path.exists(home_dir):  # user runs for the first time
        print(f"Running lndpay for the first time.")
        print(f"Creating configuration folder at {home_dir}.")
        print("The default path can be overridden by setting the "
              "LNDPAY_HOME environment variable.")

        lnd_home = os.path.expanduser('~/.lnd')

        admin_macaroon_path = os.path.join(
            lnd_home, 'data/chain/bitcoin/mainnet/admin.macaroon')
        tls_cert_path = os.path.join(lnd_home, 'tls.cert')
        if os.path.exists(lnd_home):
            print(f"Detected a local lnd configuration folder {lnd_home}.")
            print("Will use admin.macaroon and tls.cert from this directory.")
        else:
            print(f"IF LND RUNS ON A REMOTE HOST, CONFIGURE {config_path}.")

        # build config file
        config = configparser.ConfigParser()
        os.makedirs(home_dir)
        config_template_path = os.path.join(
            this_file_path, '../templates/config_sample.ini')
        config.read(config_template_path)

        config['network']['tls_cert_file'] = str(tls_cert_path)
        config['network']['admin_macaroon_file'] = str(admin_macaroon_path)

        with open(config_path, 'w') as configfile:
            config.write(configfile)
        print(f'Config file was written to {config_path}.')
        return True

    if not os.path.isfile(config_path):
        raise FileNotFoundError(
            f"Configuration file does not exist. Filename: {config_path}. "
            f"Delete .lndpay folder and run again.")
    return False
