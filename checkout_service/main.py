from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from checkout_service import config
from checkout_service.logging_config import setup_logging, get_logger
from checkout_service.routes import router
from checkout_service.database import Base, engine
from checkout_service.mailer import SmtpMailer
from checkout_service.stripe_service import StripeGateway

setup_logging()
log = get_logger(__name__)

app = FastAPI(title="Shop Checkout Service")

# Shared clients, built once and read-only for the life of the process
app.state.gateway = StripeGateway(config.STRIPE_SECRET_KEY)
app.state.mailer = SmtpMailer(
    config.SMTP_HOST,
    config.SMTP_PORT,
    config.EMAIL_USER,
    config.EMAIL_PASS,
    timeout=config.SMTP_TIMEOUT,
)

app.include_router(router)

Base.metadata.create_all(bind=engine)


@app.exception_handler(RequestValidationError)
async def invalid_checkout_body(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{field}: {first.get('msg', 'invalid request')}" if field else first.get("msg", "invalid request")
    log.warning(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/health")
def health_check():
    return {"status": "ok"}
