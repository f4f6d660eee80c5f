"""Tests for the HTTP endpoints."""
import pytest


class TestConvertAPI:
    """Test the /convert endpoint."""

    def test_convert_success(self, client):
        """Test a successful conversion answers with plain text."""
        response = client.post('/convert', data={'value': '10', 'from': 'kg', 'to': 'g'})
        assert response.status_code == 200
        assert response.mimetype == 'text/plain'
        assert response.get_data(as_text=True) == '10000.000 g'

    def test_convert_temperature(self, client):
        response = client.post('/convert', data={'value': '100', 'from': 'C', 'to': 'F'})
        assert response.status_code == 200
        assert response.get_data(as_text=True) == '212.000 F'

    def test_convert_json(self, client):
        """Test clients asking for JSON get the full outcome."""
        response = client.post(
            '/convert',
            data={'value': '1500', 'from': 'km', 'to': 'm'},
            headers={'Accept': 'application/json'}
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is True
        assert data['result'] == 1500000
        assert data['formattedResult'] == '1.500000e+06 m'
        assert data['fromUnit'] == 'km'
        assert data['toUnit'] == 'm'
        assert data['inputValue'] == 1500

    def test_convert_large_value_keeps_fraction(self, client):
        response = client.post('/convert', data={'value': '123456789.123456', 'from': 'm', 'to': 'mm'})
        assert response.status_code == 200
        assert response.get_data(as_text=True) == '123456789123.456 mm'

    @pytest.mark.parametrize('accept', ['text/plain', 'application/json'])
    def test_convert_overflow(self, client, accept):
        """Test a result too large for a float is rejected with a JSON error."""
        response = client.post(
            '/convert',
            data={'value': '1e308', 'from': 'GB', 'to': 'B'},
            headers={'Accept': accept}
        )
        assert response.status_code == 400
        assert 'Infinity' not in response.get_data(as_text=True)
        data = response.get_json()
        assert data['success'] is False
        assert 'out of range' in data['error']

    def test_convert_missing_value(self, client):
        """Test conversion without a value."""
        response = client.post('/convert', data={'from': 'kg', 'to': 'g'})
        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert 'required' in data['error']

    def test_convert_invalid_value(self, client):
        response = client.post('/convert', data={'value': 'ten', 'from': 'kg', 'to': 'g'})
        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert 'Invalid value' in data['error']

    def test_convert_unknown_unit(self, client):
        response = client.post('/convert', data={'value': '1', 'from': 'kg', 'to': 'stone'})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'invalid target unit: stone'

    def test_convert_dimension_mismatch(self, client):
        response = client.post('/convert', data={'value': '1', 'from': 'kg', 'to': 'm'})
        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert 'different dimensions' in data['error']

    @pytest.mark.parametrize('method', ['get', 'put', 'delete'])
    def test_convert_method_not_allowed(self, client, method):
        """Test non-POST requests are rejected with JSON."""
        response = getattr(client, method)('/convert')
        assert response.status_code == 405
        assert response.headers['Allow'] == 'POST'
        data = response.get_json()
        assert data['success'] is False
        assert 'POST' in data['error']


class TestUnitInfoAPI:
    """Test the /unit-info endpoint."""

    def test_unit_info(self, client):
        response = client.get('/unit-info?unit=kg')
        assert response.status_code == 200
        assert response.get_json() == {
            'symbol': 'kg',
            'name': 'Kilogram',
            'dimension': 'mass',
            'factor': 1000.0,
        }

    def test_unit_info_missing(self, client):
        response = client.get('/unit-info')
        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert data['error'] == 'Unit symbol is required'

    def test_unit_info_unknown(self, client):
        response = client.get('/unit-info', query_string={'unit': 'parsec'})
        assert response.status_code == 400
        assert 'parsec' in response.get_json()['error']

    def test_unit_info_non_ascii_symbol(self, client):
        response = client.get('/unit-info', query_string={'unit': 'µm'})
        assert response.status_code == 200
        assert response.get_json()['name'] == 'Micrometer'


class TestUnitsByDimensionAPI:
    """Test the /units-by-dimension endpoint."""

    def test_units_by_dimension(self, client):
        response = client.get('/units-by-dimension?dimension=temperature')
        assert response.status_code == 200
        assert response.get_json() == [
            {'symbol': 'C', 'name': 'Celsius'},
            {'symbol': 'F', 'name': 'Fahrenheit'},
            {'symbol': 'K', 'name': 'Kelvin'},
            {'symbol': 'Ra', 'name': 'Rankine'},
        ]

    def test_units_by_dimension_missing(self, client):
        response = client.get('/units-by-dimension')
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Dimension is required'

    def test_units_by_dimension_unknown(self, client):
        response = client.get('/units-by-dimension?dimension=luminosity')
        assert response.status_code == 400
        data = response.get_json()
        assert data['success'] is False
        assert data['error'] == 'Invalid dimension'


class TestPages:
    """Test the converter page and support routes."""

    def test_index_lists_dimensions(self, client):
        response = client.get('/')
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert 'Data Storage' in html
        assert 'Temperature' in html
        assert 'Kilogram' in html
        assert '/static/js/converter.js' in html

    def test_index_render_failure(self, client, monkeypatch):
        """Test template errors become a generic 500."""
        monkeypatch.setattr('unitconv.api.pages.TEMPLATE_NAME', 'missing.html')
        response = client.get('/')
        assert response.status_code == 500
        data = response.get_json()
        assert data['success'] is False
        assert data['error'] == 'Error rendering page'

    def test_static_assets(self, client):
        response = client.get('/static/css/style.css')
        assert response.status_code == 200
        response.close()

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json() == {'status': 'healthy', 'service': 'unitconv'}


class TestRegistryInjection:
    """Test the app serves whichever registry it is built with."""

    def test_custom_registry(self, small_registry):
        from main import create_app

        client = create_app(registry=small_registry, test_config={'TESTING': True}).test_client()

        response = client.get('/units-by-dimension?dimension=mass')
        assert response.status_code == 400

        response = client.post('/convert', data={'value': '150', 'from': 'cm', 'to': 'm'})
        assert response.status_code == 200
        assert response.get_data(as_text=True) == '1.500 m'
