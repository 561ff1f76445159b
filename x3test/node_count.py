"""
Node count extraction from X3DOM's runtime diagnostics.

``runtime.states.infos`` is not a typed API: depending on the X3DOM build it
is a mapping, a list of ``"#NODES:: 1532"`` style strings, or one such
string. Each extractor handles one shape and returns None when it does not
apply; the first non-None answer wins.
"""

import re
from typing import Any, Mapping, Optional, Sequence

from x3test.config import NODES_TAG

NODES_PATTERN = re.compile(re.escape(NODES_TAG) + r":\s*(\d+)")


def parse_nodes_text(text: str) -> Optional[int]:
    if NODES_TAG + ":" not in text:
        return None
    match = NODES_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1))


class NodeCountExtractor:
    def extract(self, infos: Any) -> Optional[int]:
        raise NotImplementedError


class DirectFieldExtractor(NodeCountExtractor):
    def extract(self, infos: Any) -> Optional[int]:
        if not isinstance(infos, Mapping):
            return None
        value = infos.get(NODES_TAG)
        if not value:
            return None
        # Coerced so nodeCount stays an integer; a non-numeric field raises and
        # the sampler records None for that window.
        return int(value)


class SequenceExtractor(NodeCountExtractor):
    def extract(self, infos: Any) -> Optional[int]:
        if not isinstance(infos, Sequence) or isinstance(infos, str):
            return None
        for info in infos:
            if isinstance(info, str):
                count = parse_nodes_text(info)
                if count is not None:
                    return count
        return None


class TextExtractor(NodeCountExtractor):
    def extract(self, infos: Any) -> Optional[int]:
        if not isinstance(infos, str):
            return None
        return parse_nodes_text(infos)


DEFAULT_EXTRACTORS = (
    DirectFieldExtractor(),
    SequenceExtractor(),
    TextExtractor(),
)


class NodeCountChain:
    def __init__(self, extractors: Optional[Sequence[NodeCountExtractor]] = None):
        self.extractors = list(extractors if extractors is not None else DEFAULT_EXTRACTORS)

    def extract(self, infos: Any) -> Optional[int]:
        if infos is None:
            return None
        for extractor in self.extractors:
            count = extractor.extract(infos)
            if count is not None:
                return count
        return None

    __call__ = extract


extract_node_count = NodeCountChain()
