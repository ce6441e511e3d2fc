from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    PRODUCT_DELETE,
    PRODUCT_DETAILS,
    PRODUCT_LIST_BUYER,
    PRODUCT_LIST_SELLER,
)
from test.shared.utils import (
    assert_response_status,
    create_product,
    list_seller_products,
    login_user,
)


LIST_ITEM_KEYS = {
    'id',
    'name',
    'brand',
    'price',
    'category',
    'freeShipping',
    'availableQuantity',
    'description',
    'image',
}


def _list_as_buyer(client: TestClient, **body: Any) -> dict[str, Any]:
    response = client.post(PRODUCT_LIST_BUYER, json=body)
    assert_response_status(response, 200)
    return response.json()


@pytest.mark.integration
class TestBuyerListing:
    def test_pages_and_total_page(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])
        for i in range(7):
            create_product(client, name=f'Product {i}')

        login_user(client, buyer_user['email'], buyer_user['password'])
        first = _list_as_buyer(client, page=1, limit=3)
        third = _list_as_buyer(client, page=3, limit=3)
        beyond = _list_as_buyer(client, page=4, limit=3)

        assert first['message'] == 'success'
        assert first['totalPage'] == 3
        assert [p['name'] for p in first['productList']] == ['Product 0', 'Product 1', 'Product 2']
        assert [p['name'] for p in third['productList']] == ['Product 6']
        assert beyond['productList'] == []
        assert beyond['totalPage'] == 3

    def test_items_carry_listing_fields_only(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])
        create_product(client)

        login_user(client, buyer_user['email'], buyer_user['password'])
        item = _list_as_buyer(client, page=1, limit=10)['productList'][0]

        assert set(item) == LIST_ITEM_KEYS

    def test_description_truncated_to_200_chars(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])
        create_product(client, description='a' * 199)
        create_product(client, description='b' * 200)
        create_product(client, description='c' * 201)

        login_user(client, buyer_user['email'], buyer_user['password'])
        items = _list_as_buyer(client, page=1, limit=10)['productList']

        assert [len(p['description']) for p in items] == [199, 200, 200]

    def test_search_is_case_insensitive_substring_on_name(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])
        create_product(client, name='Trail Runner')
        create_product(client, name='ROAD RUNNER')
        create_product(client, name='Hiking Boot', description='great for runners')

        login_user(client, buyer_user['email'], buyer_user['password'])
        result = _list_as_buyer(client, page=1, limit=10, searchText='runner')

        assert sorted(p['name'] for p in result['productList']) == ['ROAD RUNNER', 'Trail Runner']
        assert result['totalPage'] == 1

    def test_search_wildcards_are_literal(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])
        create_product(client, name='100% Cotton Tee')
        create_product(client, name='Wool Sweater')

        login_user(client, buyer_user['email'], buyer_user['password'])
        percent = _list_as_buyer(client, page=1, limit=10, searchText='%')
        underscore = _list_as_buyer(client, page=1, limit=10, searchText='_')

        assert [p['name'] for p in percent['productList']] == ['100% Cotton Tee']
        assert underscore['productList'] == []
        assert underscore['totalPage'] == 0

    def test_empty_search_lists_everything(
        self, client: TestClient, seller_user: dict[str, Any], buyer_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])
        create_product(client, name='One')
        create_product(client, name='Two', availableQuantity=0)

        login_user(client, buyer_user['email'], buyer_user['password'])
        result = _list_as_buyer(client, page=1, limit=10, searchText='')

        # Out-of-stock products stay listed
        assert len(result['productList']) == 2

    def test_seller_cannot_use_buyer_listing(
        self, client: TestClient, seller_user: dict[str, Any]
    ):
        login_user(client, seller_user['email'], seller_user['password'])

        response = client.post(PRODUCT_LIST_BUYER, json={'page': 1, 'limit': 10})

        assert_response_status(response, 403)
        assert response.json()['detail'] == 'Only buyers can perform this action'

    @pytest.mark.parametrize(
        'body',
        [
            {'page': 0, 'limit': 10},
            {'page': 1, 'limit': 0},
            {'page': 1, 'limit': 101},
            {'page': 1, 'limit': 10, 'searchText': 'x' * 61},
            {'limit': 10},
        ],
    )
    def test_invalid_pagination_is_400(
        self, client: TestClient, buyer_user: dict[str, Any], body
    ):
        login_user(client, buyer_user['email'], buyer_user['password'])

        assert_response_status(client.post(PRODUCT_LIST_BUYER, json=body), 400)


@pytest.mark.integration
class TestSellerListing:
    def test_lists_only_own_products(
        self,
        client: TestClient,
        seller_user: dict[str, Any],
        another_seller_user: dict[str, Any],
    ):
        login_user(client, another_seller_user['email'], another_seller_user['password'])
        create_product(client, name='Not mine')

        login_user(client, seller_user['email'], seller_user['password'])
        for i in range(3):
            create_product(client, name=f'Mine {i}')
        result = list_seller_products(client, page=1, limit=2)

        assert result['totalPage'] == 2
        assert [p['name'] for p in result['productList']] == ['Mine 0', 'Mine 1']

    def test_buyer_cannot_use_seller_listing(
        self, client: TestClient, buyer_user: dict[str, Any]
    ):
        login_user(client, buyer_user['email'], buyer_user['password'])

        response = client.post(PRODUCT_LIST_SELLER, json={'page': 1, 'limit': 10})

        assert_response_status(response, 403)


@pytest.mark.integration
class TestCatalogScenario:
    def test_create_list_forbid_delete_and_gone(
        self,
        client: TestClient,
        seller_user: dict[str, Any],
        another_seller_user: dict[str, Any],
        buyer_user: dict[str, Any],
    ):
        # Seller A adds a product priced 25.50
        login_user(client, seller_user['email'], seller_user['password'])
        create_product(client, price='25.50', description='z' * 450)

        # Buyer sees it with a shortened description
        login_user(client, buyer_user['email'], buyer_user['password'])
        listing = _list_as_buyer(client, page=1, limit=10, searchText='')
        assert listing['totalPage'] == 1
        product = listing['productList'][0]
        assert product['price'] == 2550
        assert len(product['description']) == 200
        product_id = product['id']

        # Seller B may not delete it
        login_user(client, another_seller_user['email'], another_seller_user['password'])
        forbidden = client.delete(PRODUCT_DELETE.format(product_id=product_id))
        assert_response_status(forbidden, 403)

        # Seller A deletes it
        login_user(client, seller_user['email'], seller_user['password'])
        assert_response_status(client.delete(PRODUCT_DELETE.format(product_id=product_id)), 200)

        # Gone for everyone
        assert_response_status(client.get(PRODUCT_DETAILS.format(product_id=product_id)), 404)
