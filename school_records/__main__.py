import uvicorn

from school_records.core.config import settings

if __name__ == "__main__":
    uvicorn.run("school_records.main:app", host=settings.HOST, port=settings.PORT)
