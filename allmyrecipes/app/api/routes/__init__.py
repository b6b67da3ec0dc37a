from fastapi import APIRouter

from allmyrecipes.app.api.routes import ocr, parse

api_router = APIRouter(prefix="/api")
api_router.include_router(parse.router)
api_router.include_router(ocr.router)
