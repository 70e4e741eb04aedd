from fastapi import APIRouter

router = APIRouter(prefix="/hello", tags=["hello"])


@router.get("/")
def read_hello() -> str:
    return "this is HelloController !"


@router.get("/sayhello/{name}")
def say_hello(name: str) -> str:
    return f"hello {name} !"


@router.post("/sayhello/{name}")
def post_say_hello(name: str) -> str:
    return f"hello {name} !"
