from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from controllers.inference import InferenceClient
from controllers.message import get_chat_history, send_message
from core.exceptions import AppError
from database.storage import BaseStore, get_store
from models.message import Message
from routes.dependencies import get_inference
from utils.state import State

router = APIRouter()


@router.get("/messages", response_model=List[Message])
async def get_messages(store: BaseStore = Depends(get_store)):
    try:
        return get_chat_history(store)
    except Exception as e:
        State.logger.error(f"An error occured while fetching messages: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch messages")


@router.post("/messages")
async def create_message(
    payload: Any = Body(None),
    store: BaseStore = Depends(get_store),
    inference: InferenceClient = Depends(get_inference),
):
    try:
        result = await run_in_threadpool(send_message, store, inference, payload)
    except AppError:
        raise
    except Exception as e:
        State.logger.error(f"An error occured while sending message: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to send message")
    return {
        key: message.model_dump(mode="json", by_alias=True)
        for key, message in result.items()
    }
