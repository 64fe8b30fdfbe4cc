"""Entrypoint for the linking-decode script that decodes a captured Linking advertisement."""

import argparse
import binascii
import json
import logging
import math
import sys
from typedargs.exceptions import ArgumentError
from linking_ble.defines import AdvertisementType
from linking_ble.exceptions import LinkingError
from linking_ble.interface import BLEAdvertisement
from linking_ble.linking.advertisements import RawAdvertisement, parse_linking_advertisement


def configure_logging(verbose):
    root = logging.getLogger()

    if verbose > 0:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s.%(msecs)03d %(levelname).3s %(name)s %(message)s',
                                      '%y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        loglevels = [logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]

        if verbose >= len(loglevels):
            verbose = len(loglevels) - 1

        level = loglevels[verbose]
        root.setLevel(level)
        root.addHandler(handler)
    else:
        root.addHandler(logging.NullHandler())


def parse_hex(data):
    """Convert a hex string, optionally separated by spaces or colons, to bytes."""

    cleaned = data.replace(':', '').replace(' ', '')
    if cleaned.lower().startswith('0x'):
        cleaned = cleaned[2:]

    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as err:
        raise ArgumentError("Could not parse hex data", data=data, error=str(err)) from err


def load_config(path):
    """Load default decode options from a JSON config file."""

    if path is None:
        return {}

    with open(path, "r") as conf_file:
        config = json.load(conf_file)

    if not isinstance(config, dict):
        raise ArgumentError("Config file must contain a JSON object", path=path)

    return config


def json_safe(value):
    """Replace NaN and infinite floats, which JSON cannot represent, with None."""

    if isinstance(value, float) and not math.isfinite(value):
        return None

    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]

    return value


def _config_power(config, key):
    value = config.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ArgumentError("Config value must be an integer number of dBm", key=key, value=value)

    return value


def build_parser():
    parser = argparse.ArgumentParser(description="Decode the manufacturer data of a Linking beacon advertisement")

    parser.add_argument('data', help="Hex encoded manufacturer data (or whole advertisement with --advert)")
    parser.add_argument('-a', '--advert', action='store_true',
                        help="Treat data as a complete advertisement packet instead of bare manufacturer data")
    parser.add_argument('-r', '--rssi', type=int, help="Received signal strength in dBm")
    parser.add_argument('-p', '--tx-power', type=int, help="Transmit power level in dBm")
    parser.add_argument('--address', help="Bluetooth address of the sender")
    parser.add_argument('-c', '--config', help="An optional JSON config file with default values for rssi, "
                                               "tx_power, address and identifier")
    parser.add_argument('-v', '--verbose', action="count", default=0,
                        help="Increase logging level (goes error, warn, info, debug)")
    return parser


def main(argv=None):
    """Decode a Linking advertisement given on the command line and print it as JSON."""

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(args.config)

        rssi = args.rssi if args.rssi is not None else _config_power(config, 'rssi')
        tx_power = args.tx_power if args.tx_power is not None else _config_power(config, 'tx_power')
        address = args.address if args.address is not None else config.get('address')
        identifier = config.get('identifier', address)

        data = parse_hex(args.data)

        if args.advert:
            advert = BLEAdvertisement(address, AdvertisementType.NONCONNECTABLE, rssi, data)
            raw = RawAdvertisement.FromBLEAdvertisement(advert, identifier=identifier)

            if tx_power is not None:
                raw = raw._replace(tx_power_level=tx_power)
        else:
            raw = RawAdvertisement(data, identifier=identifier, address=address, tx_power_level=tx_power,
                                   rssi=rssi)

        logger.debug("Decoding %d bytes of manufacturer data", 0 if raw.manufacturer_data is None
                     else len(raw.manufacturer_data))
        parsed = parse_linking_advertisement(raw)
    except (LinkingError, ArgumentError) as err:
        print("ERROR: %s" % err.format(), file=sys.stderr)
        return 1

    print(json.dumps(json_safe(parsed.asdict()), indent=4, allow_nan=False))
    return 0
