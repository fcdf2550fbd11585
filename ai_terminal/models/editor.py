from pydantic import BaseModel


class EditorState(BaseModel):
    """The single edit session a shell session may have open."""

    file_path: str
    buffer: str = ""
    is_open: bool = True
