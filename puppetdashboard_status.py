#!/usr/bin/env python3

# zabbix item/discovery helper for puppet dashboard
#   - e.g. UserParameter=puppetdashboard[*],puppetdashboard_status.py -c $1 -n $2

import sys

from puppetdashboard_health import cli

if __name__ == "__main__":
    sys.exit(cli.main())
