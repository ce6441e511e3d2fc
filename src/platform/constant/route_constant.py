# API Route Constants

# User routes
USER_BASE = '/user'
USER_REGISTER = f'{USER_BASE}/register'
USER_LOGIN = f'{USER_BASE}/login'
USER_ME = f'{USER_BASE}/me'

# Product routes
PRODUCT_BASE = '/product'
PRODUCT_ADD = f'{PRODUCT_BASE}/add'
PRODUCT_DETAILS = f'{PRODUCT_BASE}/details/{{product_id}}'
PRODUCT_DELETE = f'{PRODUCT_BASE}/delete/{{product_id}}'
PRODUCT_EDIT = f'{PRODUCT_BASE}/edit/{{product_id}}'
PRODUCT_LIST_BUYER = f'{PRODUCT_BASE}/list/buyer'
PRODUCT_LIST_SELLER = f'{PRODUCT_BASE}/list/seller'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
