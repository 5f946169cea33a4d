from pydantic import BaseModel


class FrontendContext(BaseModel):
    root_page_id: int
    sys_language_mode: str = ""
