"""
Test module to verify that all important hypothesisapi modules can be imported successfully.
This helps catch import issues early and ensures the package structure is correct.
"""
import pytest
import logging

# Set up logging to capture any import warnings
logging.basicConfig(level=logging.WARNING)
_LOGGER = logging.getLogger(__name__)


class TestImports:
    """Test suite for verifying module imports."""

    def test_main_package_import(self) -> None:
        """Test importing the main hypothesisapi package."""
        try:
            import hypothesisapi
            assert hasattr(hypothesisapi, '__version__')
            _LOGGER.info(f"Successfully imported hypothesisapi version: {hypothesisapi.__version__}")
        except ImportError as e:
            pytest.fail(f"Failed to import main hypothesisapi package: {e}")

    def test_api_imports(self) -> None:
        """Test importing the API client."""
        try:
            from hypothesisapi import Api
            assert Api is not None
        except ImportError as e:
            pytest.fail(f"Failed to import Api: {e}")

    def test_lazy_exports(self) -> None:
        import hypothesisapi
        for name in ['InputAnnotationBuilder', 'SearchQueryBuilder', 'Annotation', 'APIFailure', 'DecodeFailure',
                     'BuilderError', 'TextQuoteSelector']:
            assert getattr(hypothesisapi, name) is not None, f"Missing attribute {name} in hypothesisapi package"

    def test_config_imports(self) -> None:
        """Test importing configuration modules."""
        try:
            from hypothesisapi import configs
            assert hasattr(configs, 'get_value')
            assert hasattr(configs, 'save_value')
            assert hasattr(configs, 'resolve')
        except ImportError as e:
            pytest.fail(f"Failed to import configs: {e}")

    def test_version_consistency(self) -> None:
        """Test that version information is consistent and accessible."""
        import hypothesisapi

        assert isinstance(hypothesisapi.__version__, str)
        version_parts = hypothesisapi.__version__.split('.')
        assert len(version_parts) >= 2, f"Invalid version format: {hypothesisapi.__version__}"
