import os
from dotenv import load_dotenv

load_dotenv()

# Completion service
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-turbo")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/")
COMPLETION_TIMEOUT = float(os.getenv("COMPLETION_TIMEOUT", "30"))   # seconds
COMPLETION_MAX_RETRIES = int(os.getenv("COMPLETION_MAX_RETRIES", "2"))

# Resume uploads
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "5"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024
PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
ALLOWED_UPLOAD_TYPES = (PDF_MEDIA_TYPE, DOCX_MEDIA_TYPE)

# Front-end
API_URL = os.getenv("API_URL", "http://localhost:8000").rstrip("/")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
