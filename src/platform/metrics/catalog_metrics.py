from prometheus_client import Counter, Histogram


class CatalogMetrics:
    """Catalog business metrics exposed on /metrics"""

    def __init__(self) -> None:
        self.product_operations = Counter(
            'catalog_product_operations_total',
            'Product catalog operations',
            ['operation', 'result'],  # operation: create/edit/delete, result: ok/not_found/forbidden
        )

        self.listing_page_size = Histogram(
            'catalog_listing_page_size',
            'Number of products returned by one listing page',
            ['view'],  # buyer/seller
            buckets=[0, 1, 5, 10, 20, 50, 100],
        )

        self.user_registrations = Counter(
            'catalog_user_registrations_total', 'Registered users', ['role']
        )

    def record_product_operation(self, *, operation: str, result: str) -> None:
        self.product_operations.labels(operation=operation, result=result).inc()

    def record_listing(self, *, view: str, size: int) -> None:
        self.listing_page_size.labels(view=view).observe(size)

    def record_registration(self, *, role: str) -> None:
        self.user_registrations.labels(role=role).inc()


# Global metrics instance
metrics = CatalogMetrics()
