from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import HEALTH, METRICS


@pytest.mark.integration
class TestSystemAPI:
    def test_health(self, client: TestClient):
        response = client.get(HEALTH)

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_metrics_exposes_catalog_counters(self, client: TestClient):
        response = client.get(METRICS)

        assert response.status_code == 200
        assert 'catalog_product_operations_total' in response.text
