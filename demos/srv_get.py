import asyncio
import logging
import sys

import httpx

import srvhttp


async def main() -> int:
    if len(sys.argv) < 2:
        url = input('Enter an http+srv:// or https+srv:// URL: ').strip()
    else:
        url = sys.argv[1].strip()

    logging.basicConfig(level=logging.DEBUG if '-v' in sys.argv else logging.INFO)

    exit_code = 1
    async with srvhttp.AsyncSRVClient() as client:
        try:
            response = await client.get(url)
            print(f'{response.request.url} -> {response.status_code}')
            print(response.text)
            exit_code = 0
        except srvhttp.NoRecordsFoundError as exc:
            print(f'No instances registered: {exc}')
        except srvhttp.ResolutionFailedError as exc:
            print(f'SRV lookup failed ({type(exc.cause).__name__}): {exc}')
        except httpx.HTTPError as exc:
            print(f'Request failed: {exc}')

    return exit_code


if __name__ == '__main__':
    sys.exit(
        asyncio.run(main())
    )
