import configparser
import logging
import os
from typing import Iterable, Optional

import click

from url_escape.ascii_set import AsciiSet
from url_escape.decoder import decode, decode_to_writer
from url_escape.encoder import ENCODE_SETS, encode_to_writer, get_encode_set

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: str = os.path.expanduser('~/.url-escape')
DEFAULT_ENCODE_SET: str = 'component'

def read_config(config_file: Optional[str]) -> dict[str, str]:
    '''
    Read the configuration file.
    Only the default one may be missing, giving an empty configuration.
    '''
    if config_file is None:
        config_file = DEFAULT_CONFIG_FILE
        if not os.path.exists(config_file):
            logger.debug(f'No configuration file at {config_file}.')
            return {}

    logger.debug(f'Reading configuration file {config_file}.')
    config_parser = configparser.RawConfigParser()
    config_parser.read(config_file)
    config = {'config_file': config_file}
    if config_parser.has_option('encode', 'set'):
        config['encode_set'] = config_parser.get('encode', 'set')
    return config

def inputs(texts: Iterable[str]) -> Iterable[str]:
    '''
    The given texts, or the lines of standard input if there are none.
    Input lines that are not UTF-8 keep their bytes through surrogateescape, as arguments do.
    '''
    texts = tuple(texts)
    if texts:
        return texts
    logger.debug('Reading standard input.')
    return (
        line.decode('utf8', errors = 'surrogateescape').rstrip('\r\n')
        for line in click.open_file('-', 'rb')
    )

def configure_logging(verbose: int) -> None:
    logging.basicConfig()
    logging.getLogger('url_escape').setLevel({
        0: logging.WARNING,
        1: logging.INFO,
    }.get(verbose, logging.DEBUG))

@click.group()
@click.option('--config-file',
  type = click.Path(exists = True, dir_okay = False),
  default = None,
  help = f'Path to configuration file (default: {DEFAULT_CONFIG_FILE}).')
@click.option('-v', '--verbose',
  count = True,
  help = 'Print informational (specify once) or debug (specify twice) messages on stderr.')
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], verbose: int) -> None:
    '''Percent-encode and percent-decode text for use in URLs.'''
    configure_logging(verbose)
    ctx.obj = read_config(config_file)

@cli.command('encode')
@click.option('--set', 'set_name',
  type = str,
  default = None,
  help = f'Encode set to use, one of: {", ".join(ENCODE_SETS)}. Default: {DEFAULT_ENCODE_SET}, or as configured.')
@click.argument('texts', nargs = -1)
@click.pass_obj
def cli_encode(config: dict[str, str], set_name: Optional[str], texts: tuple[str, ...]) -> None:
    '''Encode each TEXT, or each line of standard input, one result per line.'''
    param_hint = '--set'
    if set_name is None:
        if 'encode_set' in config:
            set_name = config['encode_set']
            param_hint = f"'[encode] set' in {config['config_file']}"
        else:
            set_name = DEFAULT_ENCODE_SET
    try:
        ascii_set: AsciiSet = get_encode_set(set_name)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint = param_hint)
    logger.info(f'Encoding with set {set_name}.')

    with click.open_file('-', 'wb') as output:
        for text in inputs(texts):
            encode_to_writer(text, ascii_set, output)
            output.write(b'\n')
        output.flush()

@cli.command('decode')
@click.option('--raw',
  is_flag = True,
  default = False,
  help = 'Write the decoded bytes as they are, without replacing invalid UTF-8.')
@click.argument('texts', nargs = -1)
def cli_decode(raw: bool, texts: tuple[str, ...]) -> None:
    '''Decode each TEXT, or each line of standard input, one result per line.'''
    with click.open_file('-', 'wb') as output:
        for text in inputs(texts):
            if raw:
                decode_to_writer(text, output)
            else:
                output.write(decode(text).encode('utf8'))
            output.write(b'\n')
        output.flush()
