import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config, routes

logger = logging.getLogger(__name__)

app = FastAPI(
    title="API de Gestão de Colaboradores",
    description="Uma API para cadastrar, listar, atualizar e remover colaboradores (nome, cargo e idade).",
    version="1.0.0"
)

# Qualquer origem pode chamar a API (a interface roda em outra porta)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    """Erros são devolvidos como texto simples, não como JSON."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    """Corpo ou parâmetros inválidos também viram erro 500 em texto."""
    problemas = "; ".join(
        f"{'.'.join(str(parte) for parte in erro['loc'])}: {erro['msg']}"
        for erro in exc.errors()
    )
    logger.error("Requisição inválida em %s: %s", request.url.path, problemas)
    return PlainTextResponse(f"Dados inválidos: {problemas}", status_code=500)

# Inclui as rotas definidas no arquivo routes.py
app.include_router(routes.router)

@app.get("/")
async def root():
    """Endpoint raiz para verificar se a API está funcionando."""
    return {"message": "Bem-vindo à API de Gestão de Colaboradores!"}

def run():
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL)
    logger.info("Servidor rodando na porta %s", config.PORT)
    uvicorn.run(app, host=config.API_HOST, port=config.PORT)

if __name__ == "__main__":
    run()
