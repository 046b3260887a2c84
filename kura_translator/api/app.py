# kura_translator/api/app.py
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from pydantic import BaseModel, Field, field_validator

from kura_translator import __version__
from kura_translator.models.common import utcnow
from kura_translator.models.raw import RawDeviceMessage
from kura_translator.service import TranslationService
from kura_translator.translation.manager import TranslationManager
from kura_translator.translation.protocol import default_registry
from .exception_mappers import register_exception_handlers

logger = logging.getLogger(__name__)


class RawMessageRequest(BaseModel):
    """Raw device message as posted over HTTP; the body travels hex encoded."""
    connector_name: str
    topic: str
    body_hex: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    sent_on: Optional[datetime] = None

    @field_validator('body_hex')
    @classmethod
    def validate_body_hex(cls, v):
        if v is not None:
            bytes.fromhex(v)
        return v

    def to_raw_message(self) -> RawDeviceMessage:
        return RawDeviceMessage(
            connector_name=self.connector_name,
            topic=self.topic,
            body=bytes.fromhex(self.body_hex) if self.body_hex else None,
            metrics=self.metrics,
            sent_on=self.sent_on,
        )


def create_app(service: Optional[TranslationService] = None) -> FastAPI:
    """Build the HTTP boundary around a translation service."""
    if service is None:
        service = TranslationService(TranslationManager.create(default_registry()))

    app = FastAPI(title="Kura Translator", version=__version__)
    app.state.translation_service = service
    register_exception_handlers(app)

    @app.get("/health")
    def health():
        return {
            "status": "healthy",
            "timestamp": utcnow().isoformat(),
            "categories": list(service.manager.categories()),
        }

    @app.post("/translate/{category}")
    def translate(category: str, raw: RawMessageRequest, request: Request):
        translation_service: TranslationService = request.app.state.translation_service
        message = translation_service.process(category, raw.to_raw_message())
        return message.model_dump(mode="json")

    return app
