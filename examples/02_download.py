"""
Inspect, download and delete an upload
"""
import asyncio
import sys
from gofilepy import GofileClient, Representation


async def main(code: str, removal_code: str = None):
    async with GofileClient() as gofile:
        
        # Metadata (add the passphrase for protected uploads)
        info = await gofile.get_info(code)
        print(f"{info.code}: {len(info.files)} file(s), {info.total_size} bytes")
        for entry in info.files.values():
            print(f"  {entry.name} ({entry.size} bytes, {entry.mimetype})")
        
        # All files in memory, in manifest order
        payloads = await gofile.download_all(code)
        for entry, data in zip(info.files.values(), payloads):
            with open(entry.name, "wb") as f:
                f.write(data)
        
        # Streamed, for large files
        streams = await gofile.download_all(code, representation=Representation.STREAM)
        for stream in streams:
            async with stream:
                with open(f"streamed_{stream.name}", "wb") as f:
                    async for chunk in stream.iter_chunked(65536):
                        f.write(chunk)
        
        if removal_code:
            await gofile.remove(code, removal_code)
            print("Removed")


if __name__ == "__main__":
    asyncio.run(main(*sys.argv[1:]))
