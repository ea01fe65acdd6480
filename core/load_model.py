from core.config import APP_TITLE, OPENROUTER_BASE_URL


def load_model_via_api(
    model_name: str,
    api_key: str,
    model_provider: str = "openrouter",
    max_tokens: int = 2000,
    temperature: float = 0.7,
    timeout: float = 60.0,
    referer: str = "http://localhost:5000",
):
    if model_provider == "groq":
        from langchain_groq.chat_models import ChatGroq

        model = ChatGroq(
            model=model_name,
            api_key=api_key,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=timeout,
            max_retries=0,
        )
    elif model_provider == "openrouter":
        from langchain_openai import ChatOpenAI

        model = ChatOpenAI(
            model=model_name,
            api_key=api_key,
            base_url=OPENROUTER_BASE_URL,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout=timeout,
            max_retries=0,
            default_headers={"HTTP-Referer": referer, "X-Title": APP_TITLE},
        )
    else:
        raise ValueError(f"Unsupported model provider: {model_provider}")

    return model, None
