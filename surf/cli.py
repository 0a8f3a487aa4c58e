import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Iterable, List, Optional


def main(argv: Optional[List[str]] = None):
    from surf import ParseError, Surf, parse_surf, parse_tree

    ap = argparse.ArgumentParser(prog='surf', description='Parse surf addresses')
    ap.add_argument('address', nargs='*', help='addresses to parse')
    ap.add_argument('-i', '--input', help='file with one address per line', type=Path)
    ap.add_argument('--strict', help='the whole address has to be consumed', action='store_true')
    ap.add_argument('--highlight', help='print addresses with their parts coloured', action='store_true')
    ap.add_argument('-v', '--verbose', help='log debug messages', action='store_true')
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    addresses: Iterable[str] = args.address
    if args.input is not None:
        input_file_path: Path = args.input
        if not input_file_path.is_file():
            print('File does not exist', file=sys.stderr)
            sys.exit(2)
        with open(input_file_path, 'r') as fo:
            addresses = [line.strip() for line in fo.read().splitlines() if line.strip()]

    failed = False
    for address in addresses:
        try:
            if args.highlight:
                parse_tree(address, strict=args.strict).pp()
                continue
            if args.strict:
                surf, rest = Surf.from_string(address), ''
            else:
                surf, rest = parse_surf(address)
        except ParseError as e:
            print('{}: {}'.format(address, e), file=sys.stderr)
            failed = True
            continue

        record = surf.as_dict()
        record['rest'] = rest
        print(json.dumps(record))

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
