from typing import Any, List

import pydantic

from controllers.assessment import validation_error_from
from controllers.inference import CHAT_SYSTEM_PROMPT, InferenceClient
from database.storage import BaseStore
from models.message import Message
from schema.message import MessageCreate
from utils.state import State


def get_chat_history(store: BaseStore) -> List[Message]:
    """
    Fetch the conversation.

    Returns:
        List[Message]: All messages, oldest first.
    """
    return list(store.list_messages())


def send_message(
    store: BaseStore, inference: InferenceClient, payload: Any
) -> dict:
    """
    Store a message, ask the model to answer it and store the reply.

    The whole prior conversation is sent as context. If the model call
    fails the submitted message stays stored and the error propagates.

    Returns:
        dict: {"userMessage": Message, "assistantMessage": Message}
    """
    try:
        data = MessageCreate.model_validate(payload)
    except pydantic.ValidationError as e:
        error = validation_error_from(e)
        State.logger.error(f"Invalid message data: {error.message}")
        raise error from e

    user_message = store.create_message(data.content, data.role)
    turns = [
        {"role": msg.role, "content": msg.content}
        for msg in store.list_messages()
    ]
    reply = inference.complete(CHAT_SYSTEM_PROMPT, turns)
    assistant_message = store.create_message(reply, "assistant")
    return {"userMessage": user_message, "assistantMessage": assistant_message}
