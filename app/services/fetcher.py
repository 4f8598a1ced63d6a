import httpx

TIMEOUT = 10  # seconds
USER_AGENT = "DevSEOTools/1.0"


async def fetch_document(url: str) -> str:
    """Fetch *url* with a single GET and return the response body as text.

    Redirects are followed. No retries are attempted and the content type is
    not checked.

    Raises:
        httpx.HTTPStatusError: if the server answered with a non-2xx status.
        httpx.InvalidURL, httpx.UnsupportedProtocol: if no request could be
            built from *url*.
        httpx.RequestError: on timeouts and other network failures.
    """
    async with httpx.AsyncClient(
        timeout=TIMEOUT,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    ) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.text
