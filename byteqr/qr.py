import json
import logging
import sys

from . import config
from .encoding import encode
from .logging_config import setup_logging
from .matrix import Mask, add_data_information, construct_matrix
from .penalty import evaluate
from .render import to_string, write_png
from .tables import check_version

logger = logging.getLogger(__name__)


def find_best_mask(version, data):
    best_penalty = 0
    best_mask = 0
    for mask in range(8):
        output = construct_matrix(version, mask)
        add_data_information(output, data, mask)
        penalty = evaluate(output)
        logger.debug('Mask %d: penalty %d', mask, penalty)
        # ties go to the later mask, and nothing beats the initial 0 unless it
        # scores 0 as well
        if best_penalty >= penalty:
            best_penalty = penalty
            best_mask = mask
    logger.debug('Best mask: %d', best_mask)
    return best_mask


def render_matrix(version, data, mask=None):
    check_version(version)
    masking = Mask.get(mask)
    mask = masking.value if masking is not None else find_best_mask(version, data)
    output = construct_matrix(version, mask)
    return add_data_information(output, data, mask)


def generate_qr(content, version=config.DEFAULT_VERSION, mask=None):
    return render_matrix(version, encode(content, version), mask)


def main():
    setup_logging(config.LOG_LEVEL)
    try:
        args = json.load(sys.stdin)
        output = generate_qr(args['content'], args.get('version', config.DEFAULT_VERSION),
                             args.get('mask'))
    except (ValueError, KeyError, TypeError) as e:
        # InvalidVersion and JSONDecodeError are ValueErrors
        print('Error: {}'.format(e), file=sys.stderr)
        sys.exit(1)
    if args.get('output'):
        write_png(output, args['output'],
                  scale=args.get('scale', config.DEFAULT_SCALE),
                  border=args.get('border', config.DEFAULT_BORDER))
    else:
        print(to_string(output))


if __name__ == '__main__':
    main()
