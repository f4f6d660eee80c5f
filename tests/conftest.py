"""Shared pytest fixtures for testing."""
import pytest
from unitconv.services.conversion_service import ConversionService
from unitconv.units import Dimension, Scale, UnitDefinition, UnitRegistry, build_default_registry
from unitconv.utils.unit_converter import UnitConverter


@pytest.fixture
def registry():
    """Create the built-in unit registry."""
    return build_default_registry()


@pytest.fixture
def small_registry():
    """Create a two-dimension registry for injection tests."""
    return UnitRegistry(
        dimensions=[
            Dimension('length', 'Length'),
            Dimension('temperature', 'Temperature', Scale.AFFINE),
        ],
        units=[
            UnitDefinition('m', 1.0, 'length', 'Meter'),
            UnitDefinition('cm', 0.01, 'length', 'Centimeter'),
            UnitDefinition('K', 1.0, 'temperature', 'Kelvin'),
            UnitDefinition('C', 1.0, 'temperature', 'Celsius', 273.15),
        ],
    )


@pytest.fixture
def converter(registry):
    """Create a converter over the built-in units."""
    return UnitConverter(registry)


@pytest.fixture
def service(converter):
    """Create a conversion service over the built-in units."""
    return ConversionService(converter)


@pytest.fixture
def app():
    """Create Flask app for testing."""
    from main import create_app

    return create_app(test_config={'TESTING': True})


@pytest.fixture
def client(app):
    """Create Flask test client."""
    return app.test_client()
