# shop/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

PRODUCTS_PATH = os.getenv("PRODUCTS_PATH", os.path.join("data", "products.json"))
CUSTOMERS_PATH = os.getenv("CUSTOMERS_PATH", os.path.join("data", "customers.json"))
ORDERS_PATH = os.getenv("ORDERS_PATH", os.path.join("data", "orders.csv"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", 10))  # 0 = bez limitu
LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", 5))
STORE_RETRY_ATTEMPTS = int(os.getenv("STORE_RETRY_ATTEMPTS", 3))
TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.10"))
