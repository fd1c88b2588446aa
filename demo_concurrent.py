import asyncio
import os
import httpx

from sdk.pystore import DEFAULT_API_KEY

BASE_URL = os.getenv("CATALOG_API_URL", "http://127.0.0.1:3000")

async def create_one(client: httpx.AsyncClient, n: int):
    r = await client.post("/api/products", json={"name": f"Widget {n}", "price": 10 + n, "category": "Widgets"})
    if r.status_code != 201:
        print(f"❌ create {n} failed: {r.status_code} {r.text}")
        return None
    return r.json()["id"]

async def main(count: int = 20):
    headers = {"apikey": DEFAULT_API_KEY}
    async with httpx.AsyncClient(base_url=BASE_URL, headers=headers, timeout=10) as client:
        print(f"\n⚡ Creating {count} products concurrently...")
        ids = await asyncio.gather(*(create_one(client, n) for n in range(count)))
        ids = [i for i in ids if i is not None]

        if len(ids) == len(set(ids)):
            print(f"✅ {len(ids)} products created, all ids unique")
        else:
            print(f"⚠️  duplicate ids handed out: {sorted(ids)}")

        stats = (await client.get("/api/products/stats")).json()
        print("📊 Final stats:", stats)

if __name__ == "__main__":
    asyncio.run(main())
