# app/main.py
import logging

from fastapi import FastAPI

from .shelf import shelf_router


app = FastAPI(
    title="Bookshelf",
    description=(
        "Étagère de livres en mémoire : ajout, consultation dans l'ordre "
        "d'insertion, tri stable et regroupement."
    ),
    version="1.0.0",
)
app.include_router(shelf_router)


# 🔹 Route de base pour tester rapidement
@app.get("/")
def health_check():
    return {"status": "ok", "message": "Bookshelf live 📚"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="127.0.0.1", port=8000)
