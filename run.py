import uvicorn

from tempero.core.config import settings

if __name__ == '__main__':
    print(f"Server running at: http://{settings.HOST}:{settings.PORT}")
    uvicorn.run("tempero.main:app", host=settings.HOST, port=settings.PORT, reload=settings.APP_ENV == "local")
