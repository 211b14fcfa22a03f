from fastapi import FastAPI
from health_companion.api.routes_predict import router as predict_router
from health_companion.api.routes_documents import router as documents_router
from health_companion.api.routes_assessments import router as assessments_router
from health_companion.api.routes_assistant import router as assistant_router
from health_companion.core.logger import logger

app = FastAPI(title="Health Companion", version="1.0")

app.include_router(predict_router)
app.include_router(documents_router)
app.include_router(assessments_router)
app.include_router(assistant_router)

logger.info("Health Companion API ready")

@app.get("/health")
def health():
    return {"ok": True}
@app.get("/")
def root():
    return {"ok": True, "service": "Health Companion"}
