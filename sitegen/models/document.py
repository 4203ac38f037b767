from pydantic import BaseModel


class PrerenderedDocument(BaseModel):
    path: str
    output_file: str
    html: str
