"""Path-driven XML decoder that builds an object graph from a document.

A decoder is configured with a table of rules. Each rule names an absolute
element path (e.g. ``checkstyle/file``), the dataclass to create when an
element with that path starts, which XML attributes are copied onto which
fields, and the method of the enclosing object that receives the finished
object when the element ends.

Decoding walks the document with a pull parser and keeps an explicit stack
of frames, one per open element that matched a rule:

- element start: create the object, bind its attributes, push a frame
- element end: pop the frame and hand the object to the frame below it

The object of the outermost frame is the decoding result.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import IO, Any

from lxml import etree

from common.logger import get_logger

from ..errors import ParsingError

logger = get_logger(__name__)

# Options for the underlying libxml2 parser: no entity expansion, no DTD
# loading and no network access while parsing untrusted reports.
HARDENED_PARSER_OPTIONS: dict[str, Any] = {
    "resolve_entities": False,
    "load_dtd": False,
    "dtd_validation": False,
    "no_network": True,
    "huge_tree": False,
}


@dataclass(frozen=True)
class Binding:
    """Copies one XML attribute onto a field, converting the raw text."""

    field: str
    convert: Callable[[str], Any] = str


@dataclass(frozen=True)
class Rule:
    """One row of the path -> action table."""

    path: str
    model: type
    bindings: Mapping[str, Binding]
    attach: str | None = None  # Method of the parent object; None for the root

    def __post_init__(self):
        known = {f.name for f in fields(self.model)}
        unknown = [b.field for b in self.bindings.values() if b.field not in known]
        if unknown:
            raise ValueError(
                f"Rule '{self.path}' binds unknown fields of {self.model.__name__}: {unknown}"
            )

    def create(self, attributes: Mapping[str, str]) -> Any:
        """Create the object for an element and bind its attributes.

        Attribute names are matched case-sensitively. Attributes without a
        binding are ignored; fields without a matching attribute keep their
        default value.
        """
        obj = self.model()
        for name, raw in attributes.items():
            binding = self.bindings.get(name)
            if binding is None:
                continue
            try:
                value = binding.convert(raw)
            except ValueError as e:
                raise ParsingError(
                    f"Invalid value '{raw}' for attribute '{name}' of <{self.path}>"
                ) from e
            setattr(obj, binding.field, value)
        return obj


@dataclass
class _Frame:
    path: str
    rule: Rule
    obj: Any


class _GraphBuilder:
    """Per-decode state: the open element path and the stack of frames."""

    def __init__(self, rules: Mapping[str, Rule]):
        self.rules = rules
        self.path: list[str] = []
        self.frames: list[_Frame] = []
        self.root: Any = None

    def start(self, element) -> None:
        # Match local names so a default namespace on the report is accepted
        self.path.append(etree.QName(element).localname)
        key = "/".join(self.path)
        rule = self.rules.get(key)
        if rule is not None:
            self.frames.append(_Frame(key, rule, rule.create(element.attrib)))

    def end(self, element) -> None:
        key = "/".join(self.path)
        if self.frames and self.frames[-1].path == key:
            frame = self.frames.pop()
            if self.frames:
                parent = self.frames[-1].obj
                if frame.rule.attach is not None:
                    getattr(parent, frame.rule.attach)(frame.obj)
            elif self.root is None:
                self.root = frame.obj
        self.path.pop()
        # Attributes were copied on start; drop the subtree to keep memory flat
        element.clear()

    def consume(self, events) -> None:
        for event, element in events:
            if event == "start":
                self.start(element)
            else:
                self.end(element)


class XmlDecoder:
    """Decodes an XML stream into objects according to a rule table."""

    def __init__(self, rules: list[Rule]):
        self.rules = {rule.path: rule for rule in rules}

    def decode(self, stream: IO[str] | IO[bytes]) -> Any:
        """Decode the whole stream.

        Args:
            stream: Readable text or binary stream containing an XML document

        Returns:
            The object created for the outermost matching element, or None
            if no element of the document matched the root rule

        Raises:
            ParsingError: If the stream cannot be read or is not well-formed
                XML, or an attribute value cannot be converted
        """
        try:
            data = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(f"Failed to read input: {e}") from e

        options = dict(HARDENED_PARSER_OPTIONS)
        if isinstance(data, str):
            # Text was already decoded by the stream; ignore the declared encoding
            data = data.encode("utf-8")
            options["encoding"] = "utf-8"

        parser = etree.XMLPullParser(events=("start", "end"), **options)
        builder = _GraphBuilder(self.rules)
        try:
            parser.feed(data)
            builder.consume(parser.read_events())
            parser.close()
            builder.consume(parser.read_events())
        except etree.XMLSyntaxError as e:
            raise ParsingError(f"Malformed XML: {e}") from e

        if builder.root is None:
            logger.debug("No element matched the root rule")
        return builder.root
