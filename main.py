# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routes import quizzes, level_test, pdf

app = FastAPI(title="MCQ Learning Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[quizzes.QUIZ_ID_HEADER],
)

app.include_router(quizzes.router)
app.include_router(level_test.router)
app.include_router(pdf.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=5000, reload=True)
