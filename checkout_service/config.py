import os
from pathlib import Path
from dotenv import load_dotenv

# Force-load .env (Windows-safe, reload-safe)
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH)

DATABASE_URL = os.getenv("DATABASE_URL")

STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY", "")
CHECKOUT_CURRENCY = os.getenv("CHECKOUT_CURRENCY", "usd")

JWT_SECRET = os.getenv("JWT_SECRET", "")

# Shop mailbox: SMTP login, sender of every email and recipient of new-order alerts
EMAIL_USER = os.getenv("EMAIL_USER", "")
EMAIL_PASS = os.getenv("EMAIL_PASS", "")
SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_TIMEOUT = float(os.getenv("SMTP_TIMEOUT")) if os.getenv("SMTP_TIMEOUT") else None

SHOP_NAME = os.getenv("SHOP_NAME", "Alison's Chic & Classics")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
