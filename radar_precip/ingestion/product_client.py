import requests
from tenacity import retry, stop_after_attempt, wait_exponential
from ..utils.logging import get_logger

logger = get_logger(__name__)

class ProductClient:
    def __init__(self, base_url: str, token: str, timeout_s: int = 30):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout_s = timeout_s

    @retry(stop=stop_after_attempt(5), wait=wait_exponential(min=1, max=10), reraise=True)
    def _get(self, url: str) -> bytes:
        headers = {"token": self.token} if self.token else {}
        r = requests.get(url, headers=headers, timeout=self.timeout_s)
        r.raise_for_status()
        return r.content

    def fetch_product(self, product_id: str) -> bytes:
        url = f"{self.base_url}/{product_id.lstrip('/')}"
        payload = self._get(url)
        logger.info(f"Fetched product {product_id} ({len(payload):,} bytes)")
        return payload
