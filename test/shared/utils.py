from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    PRODUCT_ADD,
    PRODUCT_LIST_SELLER,
    USER_LOGIN,
    USER_REGISTER,
)


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Log in and keep the session cookie on the client (replacing any previous one)."""
    client.cookies.clear()
    login_response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    return login_response


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient, *, email: str, password: str, first_name: str, last_name: str, role: str
) -> Dict[str, Any]:
    response = client.post(
        USER_REGISTER,
        json={
            'firstName': first_name,
            'lastName': last_name,
            'email': email,
            'password': password,
            'role': role,
        },
    )
    assert_response_status(response, 201, f'Failed to create {role} user: {response.text}')
    return {**response.json(), 'password': password}


def product_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        'name': 'Trail Runner',
        'brand': 'Acme',
        'category': 'shoes',
        'price': '25.50',
        'availableQuantity': 10,
        'freeShipping': True,
        'description': 'Lightweight trail running shoe',
        'image': 'https://cdn.example.com/trail-runner.png',
    }
    payload.update(overrides)
    return payload


def create_product(client: TestClient, **overrides: Any) -> None:
    """Add a product as whoever is logged in on the client."""
    response = client.post(PRODUCT_ADD, json=product_payload(**overrides))
    assert_response_status(response, 200, f'Failed to add product: {response.text}')


def list_seller_products(client: TestClient, page: int = 1, limit: int = 100) -> Dict[str, Any]:
    response = client.post(PRODUCT_LIST_SELLER, json={'page': page, 'limit': limit})
    assert_response_status(response, 200)
    return response.json()


def only_product_id(client: TestClient) -> str:
    """Id of the single product owned by the logged-in seller."""
    product_list = list_seller_products(client)['productList']
    assert len(product_list) == 1, product_list
    return product_list[0]['id']
