"""Artifact handlers and the artifact type registry built from them.

Handlers describe how a dependency type maps to a file extension,
classifier and language. The registry exposes them to the resolution
engine as artifact types; unknown types get a handler whose extension
is the type id itself.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class ArtifactHandler:
    """Packaging rules of one dependency type."""

    type: str
    extension: Optional[str] = None
    classifier: Optional[str] = None
    packaging: Optional[str] = None
    language: str = "none"
    added_to_classpath: bool = False
    includes_dependencies: bool = False

    @property
    def file_extension(self) -> str:
        return self.extension or self.type


@dataclass(frozen=True)
class ArtifactType:
    """Artifact type as seen by the resolution engine."""

    id: str
    extension: str
    classifier: str = ""
    language: str = "none"
    constitutes_build_path: bool = False
    includes_dependencies: bool = False

    @classmethod
    def from_handler(cls, handler: ArtifactHandler) -> "ArtifactType":
        return cls(
            id=handler.type,
            extension=handler.file_extension,
            classifier=handler.classifier or "",
            language=handler.language,
            constitutes_build_path=handler.added_to_classpath,
            includes_dependencies=handler.includes_dependencies,
        )


DEFAULT_HANDLERS: Sequence[ArtifactHandler] = (
    ArtifactHandler("pom"),
    ArtifactHandler("jar", language="java", added_to_classpath=True),
    ArtifactHandler(
        "test-jar",
        extension="jar",
        classifier="tests",
        packaging="jar",
        language="java",
        added_to_classpath=True,
    ),
    ArtifactHandler("maven-plugin", extension="jar", language="java", added_to_classpath=True),
    ArtifactHandler("ejb", extension="jar", language="java", added_to_classpath=True),
    ArtifactHandler(
        "ejb-client",
        extension="jar",
        classifier="client",
        packaging="ejb",
        language="java",
        added_to_classpath=True,
    ),
    ArtifactHandler("war", language="java", includes_dependencies=True),
    ArtifactHandler("ear", language="java", includes_dependencies=True),
    ArtifactHandler("rar", language="java", includes_dependencies=True),
    ArtifactHandler("java-source", extension="jar", classifier="sources", language="java"),
    ArtifactHandler(
        "javadoc",
        extension="jar",
        classifier="javadoc",
        language="java",
        added_to_classpath=True,
    ),
)


class DefaultArtifactHandlerCatalog:
    """Catalog of the standard artifact handlers, optionally extended."""

    def __init__(self, extra_handlers: Iterable[ArtifactHandler] = ()):
        self._handlers: List[ArtifactHandler] = list(DEFAULT_HANDLERS)
        self._handlers.extend(extra_handlers)

    def handlers(self) -> Sequence[ArtifactHandler]:
        return tuple(self._handlers)


class ArtifactTypeRegistry:
    """Read-only lookup of artifact types by id."""

    def __init__(self, handlers: Iterable[ArtifactHandler]):
        types: Dict[str, ArtifactType] = {}
        for handler in handlers:
            # Later handlers override earlier ones with the same type
            types[handler.type] = ArtifactType.from_handler(handler)
        self._types: Mapping[str, ArtifactType] = MappingProxyType(types)

    def get(self, type_id: str) -> ArtifactType:
        """Look up a type, synthesizing one for unknown ids."""
        known = self._types.get(type_id)
        if known is not None:
            return known
        return ArtifactType.from_handler(ArtifactHandler(type_id))

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._types

    def list_types(self) -> List[str]:
        return list(self._types.keys())


def new_artifact_type_registry(catalog) -> ArtifactTypeRegistry:
    """Build the type registry from an artifact handler catalog."""
    return ArtifactTypeRegistry(catalog.handlers())
