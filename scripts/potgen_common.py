import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PyPotGen.Helpers import GetDefaultOutputPath
from PyPotGen.Options import Options, config_dir
from PyPotGen.PotError import SettingsError
from PyPotGen.PotGenerator import PotGenerator

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = os.path.join(config_dir, f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(config_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create the arg parser for the command line tool
    """
    parser = ArgumentParser(description=description)
    parser.add_argument('source', help="Directory of PHP sources to scan")
    parser.add_argument('-d', '--domain', type=str, default=None, help="Text domain to extract messages for")
    parser.add_argument('-o', '--output', type=str, default=None, help="Path of the template to write (default: <base>/languages/<domain>.pot)")
    parser.add_argument('--base', type=str, default=None, help="Directory that references are relative to (default: parent of the source directory)")
    parser.add_argument('--settings', type=str, default=None, help="JSON settings file to load")
    parser.add_argument('--extensions', type=str, default=None, help="Comma separated list of file extensions to scan")
    parser.add_argument('--exclude', type=str, default=None, help="Comma separated list of directory names to skip")
    parser.add_argument('--maxthreads', type=int, default=None, help="Maximum number of files to scan in parallel")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateOptions(args : Namespace) -> Options:
    """ Create options from the settings file, the environment and command line arguments """
    options = Options()
    if args.settings:
        if not options.LoadSettings(args.settings):
            logging.warning(f"No settings loaded from {args.settings}")
    else:
        options.LoadSettings()

    options.update({ key: value for key, value in {
        'domain': args.domain,
        'extensions': args.extensions,
        'exclude_dirs': args.exclude,
        'max_threads': args.maxthreads,
    }.items() if value is not None })

    if not options.domain:
        raise SettingsError("A text domain is required (use --domain or POTGEN_DOMAIN)")

    return options

def GetBasePath(args : Namespace) -> str:
    return os.path.abspath(args.base or os.path.dirname(os.path.abspath(args.source)))

def CreateGenerator(options : Options, args : Namespace) -> PotGenerator:
    """
    Initialise a template generator for the domain and base path
    """
    return PotGenerator(options.domain or '', GetBasePath(args), options)

def GetOutputPath(options : Options, args : Namespace) -> str:
    return args.output or GetDefaultOutputPath(GetBasePath(args), options.domain or '')
