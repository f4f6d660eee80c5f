"""Built-in unit table."""
import math

from unitconv.units.definitions import Dimension, Scale, UnitDefinition
from unitconv.units.registry import UnitRegistry

DEFAULT_DIMENSIONS = (
    Dimension('mass', 'Mass'),
    Dimension('length', 'Length'),
    Dimension('temperature', 'Temperature', Scale.AFFINE),
    Dimension('time', 'Time'),
    Dimension('frequency', 'Frequency'),
    Dimension('speed', 'Speed'),
    Dimension('volume', 'Volume'),
    Dimension('area', 'Area'),
    Dimension('energy', 'Energy'),
    Dimension('power', 'Power'),
    Dimension('force', 'Force'),
    Dimension('pressure', 'Pressure'),
    Dimension('data_storage', 'Data Storage'),
    Dimension('angle', 'Angle'),
)

# (symbol, factor, dimension, display name[, offset])
_UNIT_TABLE = (
    # Mass (base: gram)
    ('mg', 0.001, 'mass', 'Milligram'),
    ('g', 1.0, 'mass', 'Gram'),
    ('kg', 1000.0, 'mass', 'Kilogram'),
    ('t', 1e6, 'mass', 'Tonne'),
    ('oz', 28.349523125, 'mass', 'Ounce'),
    ('lb', 453.59237, 'mass', 'Pound'),

    # Length (base: meter)
    ('nm', 1e-9, 'length', 'Nanometer'),
    ('µm', 1e-6, 'length', 'Micrometer'),
    ('mm', 0.001, 'length', 'Millimeter'),
    ('cm', 0.01, 'length', 'Centimeter'),
    ('m', 1.0, 'length', 'Meter'),
    ('km', 1000.0, 'length', 'Kilometer'),
    ('in', 0.0254, 'length', 'Inch'),
    ('ft', 0.3048, 'length', 'Foot'),
    ('yd', 0.9144, 'length', 'Yard'),
    ('mi', 1609.344, 'length', 'Mile'),

    # Temperature (base: kelvin)
    ('C', 1.0, 'temperature', 'Celsius', 273.15),
    ('F', 5 / 9, 'temperature', 'Fahrenheit', 273.15 - 32 * 5 / 9),
    ('K', 1.0, 'temperature', 'Kelvin', 0.0),
    ('Ra', 5 / 9, 'temperature', 'Rankine', 0.0),

    # Time (base: second)
    ('ns', 1e-9, 'time', 'Nanosecond'),
    ('µs', 1e-6, 'time', 'Microsecond'),
    ('ms', 1e-3, 'time', 'Millisecond'),
    ('s', 1.0, 'time', 'Second'),
    ('min', 60.0, 'time', 'Minute'),
    ('h', 3600.0, 'time', 'Hour'),
    ('day', 86400.0, 'time', 'Day'),
    ('week', 604800.0, 'time', 'Week'),
    ('year', 31536000.0, 'time', 'Year (365 days)'),

    # Frequency (base: hertz)
    ('Hz', 1.0, 'frequency', 'Hertz'),
    ('kHz', 1e3, 'frequency', 'Kilohertz'),
    ('MHz', 1e6, 'frequency', 'Megahertz'),
    ('GHz', 1e9, 'frequency', 'Gigahertz'),
    ('THz', 1e12, 'frequency', 'Terahertz'),

    # Speed (base: meters per second)
    ('m/s', 1.0, 'speed', 'Meters per second'),
    ('km/h', 1 / 3.6, 'speed', 'Kilometers per hour'),
    ('ft/s', 0.3048, 'speed', 'Feet per second'),
    ('mph', 0.44704, 'speed', 'Miles per hour'),
    ('knot', 1852 / 3600, 'speed', 'Knot'),
    ('mach', 340.29, 'speed', 'Mach (at sea level)'),

    # Volume (base: cubic meter)
    ('m³', 1.0, 'volume', 'Cubic Meter'),
    ('L', 0.001, 'volume', 'Liter'),
    ('gal', 0.003785411784, 'volume', 'Gallon (US)'),
    ('fl_oz', 0.0000295735295625, 'volume', 'Fluid Ounce (US)'),

    # Area (base: square meter)
    ('m²', 1.0, 'area', 'Square Meter'),
    ('acre', 4046.8564224, 'area', 'Acre'),
    ('ha', 10000.0, 'area', 'Hectare'),

    # Energy (base: joule)
    ('J', 1.0, 'energy', 'Joule'),
    ('cal', 4.184, 'energy', 'Calorie'),
    ('kcal', 4184.0, 'energy', 'Kilocalorie'),

    # Power (base: watt)
    ('W', 1.0, 'power', 'Watt'),
    ('HP', 735.49875, 'power', 'Horsepower (metric)'),

    # Force (base: newton)
    ('N', 1.0, 'force', 'Newton'),
    ('lbf', 4.4482216152605, 'force', 'Pound-force'),

    # Pressure (base: pascal)
    ('Pa', 1.0, 'pressure', 'Pascal'),
    ('atm', 101325.0, 'pressure', 'Atmosphere'),
    ('bar', 100000.0, 'pressure', 'Bar'),

    # Data storage (base: byte)
    ('bit', 0.125, 'data_storage', 'Bit'),
    ('B', 1.0, 'data_storage', 'Byte'),
    ('KB', 1024.0, 'data_storage', 'Kilobyte'),
    ('MB', 1048576.0, 'data_storage', 'Megabyte'),
    ('GB', 1073741824.0, 'data_storage', 'Gigabyte'),

    # Angle (base: radian)
    ('rad', 1.0, 'angle', 'Radian'),
    ('deg', math.pi / 180, 'angle', 'Degree'),
    ('arcmin', math.pi / 10800, 'angle', 'Arcminute'),
    ('arcsec', math.pi / 648000, 'angle', 'Arcsecond'),
)

DEFAULT_UNITS = tuple(UnitDefinition(*row) for row in _UNIT_TABLE)


def build_default_registry() -> UnitRegistry:
    """Build the registry of built-in units."""
    return UnitRegistry(DEFAULT_DIMENSIONS, DEFAULT_UNITS)
