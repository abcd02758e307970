"""Tests for artifact handlers and the type registry."""

from artifact_session.session.artifacts import (
    ArtifactHandler,
    ArtifactType,
    ArtifactTypeRegistry,
    DefaultArtifactHandlerCatalog,
    new_artifact_type_registry,
)


class TestArtifactTypeRegistry:
    """Tests for ArtifactTypeRegistry."""

    def test_standard_types(self):
        """Test the default catalog covers the standard types."""
        registry = new_artifact_type_registry(DefaultArtifactHandlerCatalog())

        for type_id in ("pom", "jar", "test-jar", "maven-plugin", "war", "javadoc"):
            assert type_id in registry

    def test_handler_mapping(self):
        """Test handler fields map onto the artifact type."""
        registry = new_artifact_type_registry(DefaultArtifactHandlerCatalog())

        test_jar = registry.get("test-jar")
        assert test_jar.extension == "jar"
        assert test_jar.classifier == "tests"
        assert test_jar.language == "java"
        assert test_jar.constitutes_build_path

        war = registry.get("war")
        assert war.extension == "war"
        assert war.includes_dependencies
        assert not war.constitutes_build_path

    def test_unknown_type_synthesized(self):
        """Test unknown ids get a type named after themselves."""
        registry = ArtifactTypeRegistry([])

        unknown = registry.get("zip")

        assert unknown == ArtifactType(id="zip", extension="zip")
        assert "zip" not in registry

    def test_extra_handlers(self):
        """Test extra handlers extend and override the defaults."""
        catalog = DefaultArtifactHandlerCatalog(
            [
                ArtifactHandler("bundle", extension="jar", language="java"),
                ArtifactHandler("pom", extension="xml"),
            ]
        )
        registry = new_artifact_type_registry(catalog)

        assert registry.get("bundle").extension == "jar"
        assert registry.get("pom").extension == "xml"
        assert registry.list_types().count("pom") == 1

    def test_catalog_handlers_immutable(self):
        """Test the catalog hands out a copy of its handlers."""
        catalog = DefaultArtifactHandlerCatalog()

        assert isinstance(catalog.handlers(), tuple)
