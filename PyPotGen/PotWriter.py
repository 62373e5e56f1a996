import logging
import os
import tempfile
from datetime import datetime, timezone

from PyPotGen.Catalog import Catalog
from PyPotGen.CatalogEntry import CatalogEntry
from PyPotGen.PotError import PotWriteError
from PyPotGen.version import __version__

default_generator = f"PotGen {__version__}"

def FormatTimestamp(timestamp : datetime|None = None) -> str:
    timestamp = timestamp or datetime.now(timezone.utc)
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.strftime('%Y-%m-%d %H:%M+0000')

def FormatPoString(text : str) -> str:
    """
    Quote a string for a PO file.

    Backslashes, quotes, tabs and carriage returns are escaped. Each line except the last
    ends with \\n and becomes its own quoted segment on a separate output line.
    """
    lines = text.split('\n')

    segments = []
    for index, line in enumerate(lines):
        escaped = line.replace('\\', '\\\\').replace('"', '\\"').replace('\t', '\\t').replace('\r', '\\r')
        if index < len(lines) - 1:
            escaped += '\\n'
        segments.append(f'"{escaped}"')

    # text ending in a newline leaves an empty final segment
    if len(segments) > 1 and segments[-1] == '""':
        segments.pop()

    return '\n'.join(segments)

class PotWriter:
    """
    Renders a catalog as a gettext translation template
    """
    def __init__(self, domain : str, generator : str|None = None):
        self.domain = domain
        self.generator = generator or default_generator

    def ComposeHeader(self, timestamp : datetime|None = None) -> str:
        header_lines = [
            f"Project-Id-Version: {self.domain}",
            "Report-Msgid-Bugs-To: ",
            f"POT-Creation-Date: {FormatTimestamp(timestamp)}",
            "PO-Revision-Date: YEAR-MO-DA HO:MI+0000",
            "Last-Translator: ",
            "Language-Team: ",
            "Language: ",
            "MIME-Version: 1.0",
            "Content-Type: text/plain; charset=UTF-8",
            "Content-Transfer-Encoding: 8bit",
            f"X-Generator: {self.generator}",
            f"X-Domain: {self.domain}",
        ]
        header = "\n".join(header_lines) + "\n"
        return f'msgid ""\nmsgstr ""\n{FormatPoString(header)}\n\n'

    def ComposeEntry(self, entry : CatalogEntry) -> str:
        lines = [ f"#. {comment}" for comment in entry.comments.values() ]

        if entry.references:
            lines.append(f"#: {' '.join(entry.references)}")

        if entry.context:
            lines.append(f"msgctxt {FormatPoString(entry.context)}")

        lines.append(f"msgid {FormatPoString(entry.singular)}")

        if entry.is_plural:
            lines.append(f"msgid_plural {FormatPoString(entry.plural or '')}")
            lines.append('msgstr[0] ""')
            lines.append('msgstr[1] ""')
        else:
            lines.append('msgstr ""')

        return "\n".join(lines) + "\n\n"

    def Compose(self, catalog : Catalog, timestamp : datetime|None = None) -> str:
        """
        The complete template: header entry followed by the catalog entries sorted by key
        """
        parts = [ self.ComposeHeader(timestamp) ]
        parts.extend(self.ComposeEntry(entry) for entry in catalog.SortedEntries())
        return ''.join(parts)

    def Write(self, catalog : Catalog, destination : str, timestamp : datetime|None = None) -> str:
        """
        Write the template to destination, replacing any existing file.

        The content is written to a temporary file first, so a failure never leaves a
        partially written template behind.

        :return: the path written.
        :raises PotWriteError: if the destination cannot be written.
        """
        content = self.Compose(catalog, timestamp)
        directory = os.path.dirname(os.path.abspath(destination))
        temp_path = None

        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', newline='\n', dir=directory, prefix='.potgen-', suffix='.tmp', delete=False) as f:
                temp_path = f.name
                f.write(content)

            os.chmod(temp_path, 0o644)
            os.replace(temp_path, destination)

        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            raise PotWriteError(destination, e)

        logging.info(f"Wrote {len(catalog)} entries to {destination}")
        return destination
