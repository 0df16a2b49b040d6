from pydantic import BaseModel


class StoredConfig(BaseModel):
    generative_api_key: str = ""
    downloader_api_url: str = ""
    downloader_api_key: str = ""
