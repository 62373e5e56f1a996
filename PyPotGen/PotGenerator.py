from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
import logging
import os

from PyPotGen.CallScanner import CallScanner, ExtractedMessage
from PyPotGen.Catalog import Catalog
from PyPotGen.FunctionSignatures import SignatureRegistry
from PyPotGen.Helpers import GetRelativeReference, IsHidden, NormalizeExtension
from PyPotGen.Options import Options
from PyPotGen.PotError import SourceNotFoundError, SourceReadError
from PyPotGen.PotWriter import PotWriter
from PyPotGen.Tokenizer import Tokenizer

class PotGenerator:
    """
    Scans PHP sources for translation calls and writes a translation template.

    Each file is tokenized and scanned independently, on a thread pool when there
    are several. Results are merged into the catalog in file order, so the output
    does not depend on scheduling.
    """
    def __init__(self, domain : str, base_path : str, options : Options|None = None, registry : SignatureRegistry|None = None):
        self.domain = domain
        self.base_path = os.path.abspath(base_path)
        self.options = options or Options()
        self.registry = registry or SignatureRegistry()
        self.tokenizer = Tokenizer()
        self.catalog = Catalog()

    def Generate(self, source_dir : str, destination : str, timestamp : datetime|None = None) -> str:
        """
        Scan the source directory from scratch and write the template to destination.

        :return: the path written.
        :raises SourceNotFoundError: if the source directory does not exist.
        :raises PotWriteError: if the template cannot be written.
        """
        if not os.path.isdir(source_dir):
            raise SourceNotFoundError(source_dir)

        self.catalog.Clear()

        paths = self.FindSourceFiles(source_dir)
        logging.info(f"Scanning {len(paths)} files in {source_dir} for domain '{self.domain}'")

        self.ScanFiles(paths)

        writer = PotWriter(self.domain, generator=self.options.generator)
        return writer.Write(self.catalog, destination, timestamp)

    def FindSourceFiles(self, source_dir : str) -> list[str]:
        """
        Recursively list source files, skipping hidden entries, excluded directories
        and files with other extensions
        """
        extensions = set(self.options.extensions)
        exclude_dirs = set(self.options.exclude_dirs)
        paths = []

        for root, dirs, files in os.walk(os.path.abspath(source_dir)):
            dirs[:] = [ name for name in dirs if not IsHidden(name) and name not in exclude_dirs ]

            for name in files:
                if IsHidden(name):
                    continue

                if NormalizeExtension(os.path.splitext(name)[1]) in extensions:
                    paths.append(os.path.join(root, name))

        return sorted(paths)

    def ScanFiles(self, paths : list[str]):
        """
        Scan files and merge their messages into the catalog in path order. Unreadable files are skipped
        """
        paths = sorted(paths)
        max_workers = min(self.options.max_threads, max(len(paths), 1))

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = executor.map(self._scan_file_safe, paths)

            for path, messages in zip(paths, results):
                if messages is not None:
                    self.AddMessages(path, messages)

    def ScanFile(self, path : str) -> list[ExtractedMessage]:
        """
        :raises SourceReadError: if the file cannot be read or decoded.
        """
        try:
            with open(path, 'r', encoding=self.options.encoding, newline='') as f:
                source = f.read()

        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(path, e)

        return self.ScanSource(source)

    def ScanSource(self, source : str) -> list[ExtractedMessage]:
        """
        Extract the messages from the contents of one file
        """
        scanner = CallScanner(self.domain, self.registry)
        return scanner.Scan(self.tokenizer.Tokenize(source))

    def AddMessages(self, path : str, messages : list[ExtractedMessage]):
        relative_path = GetRelativeReference(path, self.base_path)
        for message in messages:
            reference = f"{relative_path}:{message.line}"
            self.catalog.Add(message.singular, message.plural, message.context, reference, message.comment)

        if messages:
            logging.debug(f"Found {len(messages)} messages in {relative_path}")

    def _scan_file_safe(self, path : str) -> list[ExtractedMessage]|None:
        try:
            return self.ScanFile(path)

        except SourceReadError as e:
            logging.warning(f"Skipping file: {e}")
            return None
