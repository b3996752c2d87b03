"""
ResX resource walker.

Rewrites the string values of a .resx document and leaves everything else
(schema, resheaders, comments, non-string data) as it was.
"""

import xml.etree.ElementTree as ET
from typing import BinaryIO, Callable, Iterator

from pseudolocalizer.exceptions import ResourceFormatError
from pseudolocalizer.logger import get_logger

logger = get_logger(__name__)

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
MSDATA_NAMESPACE = "urn:schemas-microsoft-com:xml-msdata"

# Keep the prefixes Visual Studio writes instead of ns0/ns1
ET.register_namespace("xsd", XSD_NAMESPACE)
ET.register_namespace("msdata", MSDATA_NAMESPACE)

# Designer metadata such as ">>button1.Name" or "$this.Text" is not UI text
NON_LOCALIZABLE_PREFIXES = (">>", "$")


def is_localizable(data: ET.Element) -> bool:
    """Check if a <data> element holds a plain, translatable string."""
    if "type" in data.attrib or "mimetype" in data.attrib:
        return False

    name = data.get("name", "")
    if not name or name.startswith(NON_LOCALIZABLE_PREFIXES):
        return False

    value = data.find("value")
    return value is not None and value.text is not None


def iter_entries(root: ET.Element) -> Iterator[ET.Element]:
    """Yield the <value> element of every localizable <data> entry."""
    for data in root.findall("data"):
        if is_localizable(data):
            yield data.find("value")


class ResxProcessor:
    """Applies a string transform to every localizable value of a ResX document."""

    def __init__(self, transform: Callable[[str], str]):
        self.transform = transform

    def parse(self, input_stream: BinaryIO) -> ET.ElementTree:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            return ET.parse(input_stream, parser=parser)
        except ET.ParseError as e:
            raise ResourceFormatError(f"Invalid ResX document: {e}") from e

    def process(self, input_stream: BinaryIO, output_stream: BinaryIO) -> int:
        """
        Transform a ResX document.

        Args:
            input_stream: Binary stream with the source document
            output_stream: Binary stream the rewritten document is written to

        Returns:
            Number of values rewritten

        Raises:
            ResourceFormatError: If the input is not well-formed XML
        """
        tree = self.parse(input_stream)

        count = 0
        for value in iter_entries(tree.getroot()):
            value.text = self.transform(value.text)
            count += 1

        logger.debug(f"Transformed {count} ResX values")
        tree.write(output_stream, encoding="utf-8", xml_declaration=True)
        return count
