"""
Locate and rewrite the single tiddler inside a TiddlyWiki-style document.

The document is treated as opaque text apart from one region shaped like
``<div ... tags="A B C" ...> ... <pre>CONTENT</pre> ... </div>``. Extraction
splits that region into pieces; splicing glues replacement tags and content
back in, leaving every other byte of the document as it was.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from .errors import StructuralFormatError

TIDDLER_PATTERN = re.compile(
    r'(<div[^>]*tags=")([^"]+)(".*?>[\s\S]*?<pre>)([\s\S]*?)(</pre>[\s\S]*</div>)'
)


@dataclass(frozen=True)
class TiddlerDocument:
    prefix: str
    pre_tags: str
    tags: Tuple[str, ...]
    post_tags: str
    content: str
    end_div: str
    suffix: str

    @classmethod
    def extract(cls, text: str) -> "TiddlerDocument":
        match = TIDDLER_PATTERN.search(text)
        if match is None:
            raise StructuralFormatError(
                "Tiddler file is not in the expected format (missing <div>, tags, or <pre>)."
            )
        pre_tags, tags_string, post_tags, content, end_div = match.groups()
        return cls(
            prefix=text[:match.start()],
            pre_tags=pre_tags,
            tags=split_tags(tags_string),
            post_tags=post_tags,
            content=content,
            end_div=end_div,
            suffix=text[match.end():],
        )

    def with_tiddler(self, tags: Sequence[str], content: str) -> "TiddlerDocument":
        return replace(self, tags=tuple(tags), content=content)

    def splice(self, tags: Sequence[str], content: str) -> str:
        return self.with_tiddler(tags, content).render()

    def render(self) -> str:
        return "".join(
            (
                self.prefix,
                self.pre_tags,
                " ".join(self.tags),
                self.post_tags,
                self.content,
                self.end_div,
                self.suffix,
            )
        )


def split_tags(tags_string: str) -> Tuple[str, ...]:
    # Single-space split with empty tokens dropped, so runs of spaces collapse.
    return tuple(tag for tag in tags_string.split(" ") if tag)


def extract(text: str) -> Tuple[List[str], str]:
    doc = TiddlerDocument.extract(text)
    return list(doc.tags), doc.content


def splice(text: str, tags: Sequence[str], content: str) -> str:
    return TiddlerDocument.extract(text).splice(tags, content)


__all__ = ["TIDDLER_PATTERN", "TiddlerDocument", "extract", "splice", "split_tags"]
