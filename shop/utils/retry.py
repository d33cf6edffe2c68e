# shop/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type


#zapis do pliku moze sie nie udac chwilowo (lock, pelny dysk), ponawiamy tylko OSError
def store_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        retry=retry_if_exception_type(OSError),
    )
