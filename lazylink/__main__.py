from lazylink import lazy_list
from lazylink.errors import LazyListError
import argparse
import sys


lazylink = argparse.ArgumentParser(
    description='Walk a lazily generated list and show it growing',
    prog='lazylink'
)

lazylink.add_argument(
    '-n', '--count', dest='count',
    help='number of values the generator produces [default: 10]',
    type=int, default=10
)

lazylink.add_argument(
    '-s', '--step', dest='step',
    help='difference between consecutive values [default: 10]',
    type=int, default=10
)

lazylink.add_argument(
    '--index', metavar='I', type=int, action='append', default=[],
    help='after walking, look up the materialized value at index I'
)

lazylink.add_argument(
    '--find', metavar='VALUE', type=int,
    help='search for VALUE before walking the rest of the list'
)


@lazy_list
def multiples(count, step):
    for i in range(count):
        yield i * step


def show(where, message):
    print(f'[{where}]: {message}')


def main(argv=None):
    args = lazylink.parse_args(argv)
    if args.count < 0:
        lazylink.error('Count must not be negative')
        return 1

    with multiples(args.count, args.step) as lst:
        try:
            if args.find is not None:
                cursor = lst.find(args.find)
                if cursor.at_end:
                    show('find', f'{args.find} not found')
                else:
                    show('find', f'{lst.size()} -> {cursor.value}')

            for value in lst:
                show('main', f'{lst.size()} -> {value}')
            show('main', lst.size())

            for index in args.index:
                show('index', f'{index} -> {lst[index]}')
        except LazyListError as err:
            print(err.get_info(lazylink.prog), file=sys.stderr)
            return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
