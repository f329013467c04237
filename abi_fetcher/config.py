import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "dev")

# --- Explorer API ---
ETHERSCAN_API_URL = os.getenv("ETHERSCAN_API_URL", "https://api.etherscan.io/api")
# "apikey" is still accepted for older .env files
ETHERSCAN_API_KEY = os.getenv("ETHERSCAN_API_KEY") or os.getenv("apikey", "")
ETHERSCAN_API_TIMEOUT = int(os.getenv("ETHERSCAN_API_TIMEOUT") or "15")
ETHERSCAN_API_PROXY_URL = os.getenv("ETHERSCAN_API_PROXY_URL") or None
