import base64

from starlette.datastructures import UploadFile


async def image_to_data_url(file: UploadFile) -> str:
    file_bytes = await file.read()
    content_type = file.content_type or "application/octet-stream"
    encoded = base64.b64encode(file_bytes).decode("ascii")
    return f"data:{content_type};base64,{encoded}"
