"""The command-line application.

    $ itch yes -c y,yes true -c n,no false --default unknown
    true

Each case pairs a comma-separated list of candidates with a result.
Cases from the configuration file come first, in order,
followed by cases from the command line, in order.
The first case with a candidate matching the seed wins.
"""

import logging

import click
import pydantic
import tomlkit.exceptions

from itch import functional as fn
from itch.chain import create
from itch.config import COMPARATOR_ALIASES, ComparatorName, Configuration

_MISSING = object()

def parse_number(text):
    try:
        return float(text)
    except ValueError:
        raise click.BadParameter(f'not a number: {text!r}')

def decide(seed, config: Configuration):
    """Run the cases of `config` against `seed` and return the chain."""
    numeric = config.numeric or config.comparator is ComparatorName.CLOSE
    convert = parse_number if numeric else fn.identity
    chain = create(convert(seed)).using(config.compare())
    for case in config.cases:
        candidates = [convert(c) for c in case.candidates]
        if len(candidates) == 1:
            attempt = chain.match(candidates[0])
        else:
            attempt = chain.match_one_of(candidates)
        chain = attempt.then(case.result)
    return chain

def _cases(separator, pairs):
    return [
        {'candidates': candidates.split(separator), 'result': result}
        for candidates, result in pairs
    ]

_matching_options = fn.compose(
    click.option(
        '--comparator',
        type=click.Choice(
            [c.value for c in ComparatorName] + list(COMPARATOR_ALIASES),
            case_sensitive=False,
        ),
        help='How to compare the seed with each candidate.',
    ),
    click.option(
        '--tolerance',
        type=float,
        help='Absolute tolerance for the "close" comparator.',
    ),
    click.option(
        '--numeric/--no-numeric',
        default=None,
        help='Compare the seed and candidates as numbers.',
    ),
)

_case_options = fn.compose(
    click.option(
        '-c', '--case', 'pairs',
        nargs=2,
        multiple=True,
        metavar='CANDIDATES RESULT',
        help='Print RESULT if the seed matches one of CANDIDATES.',
    ),
    click.option(
        '--separator',
        default=',',
        show_default=True,
        help='Separator between candidates.',
    ),
    click.option(
        '--default',
        help='Print this if no case matches.',
    ),
)

@click.command(context_settings={'help_option_names': ('--help', '-h')})
@click.argument('seed')
@_case_options
@_matching_options
@click.option(
    '-f', '--file', 'path',
    type=click.Path(dir_okay=False),
    help='TOML file of settings and cases. [default: .itch.toml, if present]',
)
@click.option('-v', '--verbose', count=True)
@click.option('-q', '--quiet', count=True)
@click.version_option(package_name='itch')
def main(seed, pairs, separator, path, verbose, quiet, **kwargs):
    """Print the result of the first case whose candidates match SEED."""
    logging.basicConfig(level=(3 - verbose + quiet) * 10)
    # Options left unset must not override the file.
    kwargs = {k: v for k, v in kwargs.items() if v is not None}
    if pairs:
        kwargs['cases'] = _cases(separator, pairs)
    try:
        config = Configuration.from_all(path=path, **kwargs)
    except FileNotFoundError as error:
        raise click.BadParameter(
            f'no such file: {error.filename}', param_hint='--file'
        )
    except (pydantic.ValidationError, tomlkit.exceptions.ParseError) as error:
        raise click.UsageError(str(error))
    logging.debug(config)
    result = decide(seed, config).scratch()(
        _MISSING if config.default is None else config.default
    )
    if result is _MISSING:
        raise SystemExit(1)
    click.echo(result)
