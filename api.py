"""
FastAPI REST API for the CAML Query Builder.

Converts LoopBack-style filters to CAML view XML.
"""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from caml_builder import CamlBuilderError, ModelBuilder, TranslatorSettings, translate

load_dotenv()

app = FastAPI(
    title="CAML Query Builder API",
    description="Convert LoopBack-style filters to CAML view XML",
    version="1.0.0",
)


class ModelDefinition(BaseModel):
    """Model definition in LoopBack form."""
    name: str = Field(..., description="Model name")
    properties: Dict[str, Any] = Field(..., description="Property definitions")
    options: Optional[Dict[str, Any]] = Field(None, description="Model-level settings")


class TranslateRequest(BaseModel):
    """Request model for filter translation."""
    model: ModelDefinition
    filter: Dict[str, Any] = Field(default_factory=dict, description="LoopBack filter")


class TranslateResponse(BaseModel):
    """Response model for filter translation."""
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    list_name: Optional[str] = None
    view_xml: str


@app.post("/translate", response_model=TranslateResponse)
async def translate_filter(request: TranslateRequest):
    """
    Translate a filter to a CAML view.

    Returns the view XML without contacting the store.
    """
    try:
        model = ModelBuilder(
            request.model.name,
            request.model.properties,
            request.model.options,
        ).build()
        view_xml = translate(model, request.filter, TranslatorSettings.from_env())
    except (CamlBuilderError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TranslateResponse(
        model_name=model.name,
        list_name=model.list_name,
        view_xml=view_xml,
    )


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("API_PORT", "8000"))
    host = os.getenv("API_HOST", "0.0.0.0")

    uvicorn.run(app, host=host, port=port)
