"""
Upload files to gofile
"""
import asyncio
import io
import time
from gofilepy import GofileClient, UploadOptions, UploadTarget


async def main():
    async with GofileClient() as gofile:
        
        # Upload a local file (streamed from disk)
        result = await gofile.upload_path("document.pdf")
        print(f"Uploaded: {result.link} (removal code: {result.removal_code})")
        
        # Upload bytes (a name is required)
        result = await gofile.upload_buffer(b"hello world", "hello.txt")
        print(f"Uploaded: {result.code}")
        
        # Upload an open file object (name inferred)
        with open("photo.jpg", "rb") as f:
            result = await gofile.upload_stream(f)
        print(f"Uploaded: {result.code}")
        
        # Several files as one protected upload, expiring in one day
        options = UploadOptions(
            description="Holiday pictures",
            password="summer2024",
            expire=int(time.time()) + 86400
        )
        result = await gofile.upload_files([
            UploadTarget(open("a.jpg", "rb")),
            UploadTarget(io.BytesIO(b"notes"), "notes.txt"),
        ], options)
        print(f"Uploaded: {result.link}")


if __name__ == "__main__":
    asyncio.run(main())
