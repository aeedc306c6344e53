#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/utils/metadata

"""Document metadata container.

Metadata is derived from the document header: the title, the author line and
the well-known document attributes. Every other attribute ends up in
``custom``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Attributes mapped onto dedicated DocumentMetadata fields
STANDARD_ATTRIBUTE_FIELDS = frozenset(
    {"author", "email", "description", "keywords", "lang", "language", "revnumber"}
)


@dataclass
class DocumentMetadata:
    """Container for document metadata.

    Parameters
    ----------
    title : str | None
        Document title
    author : str | None
        Primary author
    email : str | None
        Author email address
    subject : str | None
        Document description
    keywords : list[str] | None
        Document keywords
    language : str | None
        Document language
    version : str | None
        Document version (from the ``revnumber`` attribute)
    custom : dict[str, Any]
        Remaining document attributes

    """

    title: Optional[str] = None
    author: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[List[str]] = None
    language: Optional[str] = None
    version: Optional[str] = None
    custom: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary, excluding empty values.

        Returns
        -------
        dict
            Dictionary containing only non-empty metadata fields

        """
        result: Dict[str, Any] = {}

        if self.title:
            result["title"] = self.title
        if self.author:
            result["author"] = self.author
        if self.email:
            result["email"] = self.email
        if self.subject:
            result["description"] = self.subject
        if self.keywords:
            result["keywords"] = self.keywords
        if self.language:
            result["language"] = self.language
        if self.version:
            result["version"] = self.version

        # Valueless attributes are flags; standard fields win over custom keys
        for key, value in self.custom.items():
            result.setdefault(key, True if value is None else value)

        return result
