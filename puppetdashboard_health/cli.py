import argparse
import json
import logging
import os
import sys

import sentry_sdk

from puppetdashboard_health import aggregator, classifier, config, dashboard, dates, formatters
from puppetdashboard_health.exceptions import EXIT_FAILURE, EXIT_OK, PuppetDashboardException

logger = logging.getLogger(__name__)

log_format = "%(levelname)-10s %(funcName)s: %(message)s"

DISCOVERY = "discovery"
ZABBIX_SENDER = "zabbix_sender"
NODE_COMMANDS = [field.value for field in classifier.FieldKind]
SUM_COMMANDS = list(aggregator.FLEET_COUNT_KEYS)
COMMANDS = [DISCOVERY, ZABBIX_SENDER] + NODE_COMMANDS + SUM_COMMANDS


class ArgumentParser(argparse.ArgumentParser):
    # usage errors exit 1, 2 means 'node not found'
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = ArgumentParser(
        description="report puppet dashboard node status for zabbix.",
        usage="%(prog)s [options] -c [" + "|".join(COMMANDS) + "]",
    )
    parser.add_argument(
        "-c",
        "--command",
        choices=COMMANDS,
        metavar="CMD",
        help="command to execute (one of %s)." % ", ".join(COMMANDS),
    )
    parser.add_argument(
        "-n",
        "--nodename",
        metavar="NAME",
        help="node hostname for commands [%s]." % "|".join(NODE_COMMANDS),
    )
    parser.add_argument(
        "-u",
        "--url",
        metavar="URL",
        help="dashboard base url, defaults to $%s or %s." % (config.URL_ENV_VAR, config.DEFAULT_DASHBOARD_URL),
    )
    parser.add_argument(
        "-S",
        "--no-ssl-verify",
        action="store_false",
        dest="ssl_verify",
        default=True,
        help="disable ssl certificate verification.",
    )
    parser.add_argument(
        "-t",
        "--unresponsive-threshold",
        type=int,
        metavar="SECONDS",
        help="nodes not updated for longer than this are unresponsive, defaults to %s."
        % aggregator.UNRESPONSIVE_THRESHOLD_SECONDS,
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="http timeout, defaults to %s." % config.DEFAULT_TIMEOUT,
    )
    parser.add_argument(
        "--config",
        default=config.DEFAULT_CONFIG_FILE,
        metavar="PATH",
        help="toml configuration file, defaults to %s." % config.DEFAULT_CONFIG_FILE,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="log_level",
        default=0,
        help="specify multiple times for even more verbosity.",
    )
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("No command given")
    if args.command in NODE_COMMANDS and not args.nodename:
        parser.error("No nodename given")
    return args


def setup_logging(verbosity=0):
    # stdout is for zabbix
    logging.basicConfig(format=log_format, stream=sys.stderr, level=logging.WARNING)
    root_logger = logging.getLogger()
    if verbosity == 1:
        root_logger.setLevel(logging.INFO)
    elif verbosity >= 2:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.WARNING)


def init_sentry():
    if "SENTRY_DSN" in os.environ:
        sentry_sdk.init(dsn=os.environ["SENTRY_DSN"], traces_sample_rate=1.0)
        logger.info("SENTRY_DSN set, initializing sentry")
    else:
        logger.info("SENTRY_DSN not set, not initializing sentry")


def run_command(args, records, now, threshold):
    """Return the text printed for args.command."""
    if args.command == DISCOVERY:
        return json.dumps(formatters.discovery_document(records), separators=(",", ":"))
    if args.command == ZABBIX_SENDER:
        counts = aggregator.aggregate(records, now, threshold)
        return formatters.sender_lines(records, counts, now)
    if args.command in SUM_COMMANDS:
        return str(aggregator.fleet_count(records, now, args.command, threshold))
    field = classifier.FieldKind.from_command(args.command)
    return str(classifier.lookup(records, args.nodename, field))


def main(argv=None):
    orig_argv = sys.argv[1:] if argv is None else list(argv)
    args = parse_args(argv)
    setup_logging(args.log_level)
    init_sentry()
    logger.info("arguments given: %s" % orig_argv)

    try:
        options = config.Config.load(args, configuration_file=args.config)
        logger.info("options: %s" % options)

        records = dashboard.fetch_nodes(options)
        now = dates.now()
        logger.debug("now is %s" % dates.format(now))
        output = run_command(args, records, now, options.unresponsive_threshold)
    except PuppetDashboardException as e:
        logger.error(str(e))
        return e.exit_code

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
