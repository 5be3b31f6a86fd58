# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2025/03/03 13:05:52
# @Author : Kariko Lin

"""`python -m pyinicfg [config.ini] [--get Section1.var1:int ...]`

Without `--get`, every `section.key = value` is printed.
Exit code 1 for INI errors, 2 for anything else.
"""

import argparse
import logging
import sys
from typing import Sequence

from .ini.errors import IniError
from .ini.formats import dumps
from .store import ConfigStore


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog='pyinicfg',
        description='Read values out of a simple INI config file.')
    ap.add_argument(
        'config', nargs='?', default='config.ini',
        help='config file path (default: %(default)s)')
    ap.add_argument(
        '--no-default', action='store_true',
        help='fail instead of creating a default config when missing')
    ap.add_argument(
        '-g', '--get', action='append', default=[], metavar='PATH[:TYPE]',
        help='print one value; TYPE is int, double, float, bool or string')
    ap.add_argument(
        '--dump', choices=('ini', 'json', 'yaml'),
        help='print the whole parsed document')
    ap.add_argument('-e', '--encoding', help='config file encoding')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(asctime)s] %(levelname)s: %(message)s')
    try:
        cfg = ConfigStore(args.config, not args.no_default,
                          encoding=args.encoding)
        if args.dump:
            print(dumps(cfg.document, args.dump), end='')
            return 0
        if not args.get:
            for sect, pairs in cfg.document.items():
                for k, v in pairs.items():
                    print(f'{sect}.{k} = {v}')
            return 0
        for i in args.get:
            path, _, target = i.rpartition(':')
            if not path:
                path, target = target, 'string'
            print(f'{path} = {cfg.get(path, target)}')
    except IniError as e:
        logging.error(e)
        return 1
    except Exception as e:
        logging.exception(f'unexpected error: {e}')
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
