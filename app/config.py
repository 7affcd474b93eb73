import os
from dotenv import load_dotenv

load_dotenv()

# Valores padrão herdados da primeira versão do servidor
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "admin")
DB_NAME = os.getenv("DB_NAME", "crud_react_express")

API_HOST = os.getenv("API_HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

API_URL = os.getenv("API_URL", "http://localhost:5000/colaboradores")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
