# tests/test_chat_assistant.py
import asyncio
import os

import httpx
import pytest

from mcp_dev_bridges.chat import ChatAssistant
from mcp_dev_bridges.chat.images import validate_image_request, download_images
from mcp_dev_bridges.constants import DEFAULT_SYSTEM_MESSAGE
from mcp_dev_bridges.dispatch import chat_dispatcher
from mcp_dev_bridges.errors import ImageSizeError, ImageGenerationError

from _utils import FakeOpenAI, chat_config


@pytest.fixture(scope="function")
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture
def openai_client():
    return FakeOpenAI(
        reply="use a quadtree",
        image_urls=("https://images.example/a.png", "https://images.example/b.png"),
    )


@pytest.fixture
def downloads():
    return []


@pytest.fixture
def http_client(downloads):
    def handler(request: httpx.Request) -> httpx.Response:
        downloads.append(str(request.url))
        if request.url.path.endswith("missing.png"):
            return httpx.Response(404)
        return httpx.Response(200, content=b"PNGDATA:" + request.url.path.encode())

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def assistant(openai_client, http_client, tmp_path):
    return ChatAssistant(client=openai_client, config=chat_config(tmp_path / "images"), http_client=http_client)


# ------------------------------
# ask / analyze / game dev
# ------------------------------

def test_ask_uses_configured_defaults(assistant, openai_client, event_loop):
    reply = event_loop.run_until_complete(assistant.ask("How do I debounce input?"))

    assert reply == "use a quadtree"
    call = openai_client.completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["max_tokens"] == 2000
    assert call["temperature"] == 0.7
    assert call["messages"] == [
        {"role": "system", "content": DEFAULT_SYSTEM_MESSAGE},
        {"role": "user", "content": "How do I debounce input?"},
    ]


def test_ask_sends_context_before_prompt_and_honors_overrides(assistant, openai_client, event_loop):
    event_loop.run_until_complete(
        assistant.ask(
            "Why is it slow?",
            context="Three.js scene with 10k meshes",
            system_message="Be terse.",
            model="gpt-4o",
            max_tokens=100,
            temperature=0.0,
        )
    )

    call = openai_client.completions.calls[0]
    assert call["model"] == "gpt-4o"
    assert call["max_tokens"] == 100
    assert call["temperature"] == 0.0
    assert [m["content"] for m in call["messages"]] == [
        "Be terse.",
        "Context: Three.js scene with 10k meshes",
        "Why is it slow?",
    ]


def test_ask_with_empty_reply_returns_placeholder(tmp_path, event_loop):
    assistant = ChatAssistant(client=FakeOpenAI(reply=None), config=chat_config(tmp_path))

    assert event_loop.run_until_complete(assistant.ask("hello")) == "No response received"


def test_ask_keeps_explicit_empty_system_message(assistant, openai_client, event_loop):
    event_loop.run_until_complete(assistant.ask("hi", system_message=""))

    assert openai_client.completions.calls[0]["messages"][0] == {"role": "system", "content": ""}


def test_analyze_code_uses_low_temperature_and_language_system_message(assistant, openai_client, event_loop):
    event_loop.run_until_complete(assistant.analyze_code("let x = 1", "typescript", "review"))

    call = openai_client.completions.calls[0]
    assert call["temperature"] == 0.3
    assert call["messages"][0]["content"] == "You are an expert typescript developer providing review assistance."
    assert "```typescript\nlet x = 1\n```" in call["messages"][-1]["content"]


def test_game_dev_assistance_uses_framework_context(assistant, openai_client, event_loop):
    event_loop.run_until_complete(
        assistant.game_dev_assistance("drift physics", "cannon-js", "implement", current_code="car.update()")
    )

    call = openai_client.completions.calls[0]
    assert call["temperature"] == 0.4
    assert "Cannon.js physics engine" in call["messages"][0]["content"]
    assert "car.update()" in call["messages"][-1]["content"]


def test_analyze_code_rejects_unknown_analysis_type(assistant, openai_client, event_loop):
    with pytest.raises(ValueError, match="Invalid analysis_type"):
        event_loop.run_until_complete(assistant.analyze_code("x", "python", "refactor"))

    assert openai_client.completions.calls == []


# ------------------------------
# images
# ------------------------------

@pytest.mark.parametrize("model, size", [
    ("dall-e-3", "1792x1024"),
    ("dall-e-3", "1024x1792"),
    ("dall-e-2", "256x256"),
    ("dall-e-2", "1024x1024"),
])
def test_validate_image_request_accepts_supported_sizes(model, size):
    validate_image_request(model, size)


def test_validate_image_request_rejects_unsupported_size():
    with pytest.raises(ImageSizeError, match="DALL-E 3 only supports sizes: 1024x1024, 1792x1024, 1024x1792"):
        validate_image_request("dall-e-3", "512x512")
    with pytest.raises(ImageSizeError, match="DALL-E 2 only supports sizes"):
        validate_image_request("dall-e-2", "1792x1024")


def test_dalle3_bad_size_fails_before_any_api_call(assistant, openai_client, downloads, event_loop):
    with pytest.raises(ImageSizeError):
        event_loop.run_until_complete(assistant.generate_image("a kart", model="dall-e-3", size="512x512"))

    assert openai_client.images.calls == []
    assert downloads == []


def test_dalle3_request_forces_single_image_with_quality_and_style(assistant, openai_client, event_loop):
    event_loop.run_until_complete(assistant.generate_image("a kart", n=4, quality="hd", style="natural"))

    assert openai_client.images.calls == [{
        "model": "dall-e-3",
        "prompt": "a kart",
        "size": "1024x1024",
        "n": 1,
        "quality": "hd",
        "style": "natural",
    }]


def test_dalle2_request_passes_n_without_quality_or_style(assistant, openai_client, event_loop):
    event_loop.run_until_complete(assistant.generate_image("a track", model="dall-e-2", size="512x512", n=2))

    assert openai_client.images.calls == [{"model": "dall-e-2", "prompt": "a track", "size": "512x512", "n": 2}]


def test_generate_image_downloads_files_and_summarizes(assistant, downloads, tmp_path, event_loop):
    summary = event_loop.run_until_complete(assistant.generate_image("a kart"))

    images_dir = tmp_path / "images"
    saved = sorted(os.listdir(images_dir))
    assert len(saved) == 2
    assert saved[0].endswith("_dall-e-3_1.png")
    assert saved[1].endswith("_dall-e-3_2.png")
    assert (images_dir / saved[0]).read_bytes() == b"PNGDATA:/a.png"
    assert downloads == ["https://images.example/a.png", "https://images.example/b.png"]

    assert summary.startswith("Generated 2 image(s) successfully!")
    assert str(images_dir / saved[0]) in summary
    assert "https://images.example/b.png" in summary
    assert '**Prompt:** "a kart"' in summary
    assert "**Quality:** standard" in summary


def test_download_failure_is_wrapped(tmp_path, http_client, event_loop):
    client = FakeOpenAI(image_urls=("https://images.example/missing.png",))
    assistant = ChatAssistant(client=client, config=chat_config(tmp_path), http_client=http_client)

    with pytest.raises(ImageGenerationError, match="Image generation failed"):
        event_loop.run_until_complete(assistant.generate_image("a kart"))


class _BrokenBody(httpx.AsyncByteStream):
    """Body that delivers some bytes and then drops the connection."""

    async def __aiter__(self):
        yield b"partial-bytes"
        raise httpx.ReadError("connection reset")


def test_interrupted_download_leaves_no_partial_file(tmp_path, event_loop):
    def handler(request):
        return httpx.Response(200, stream=_BrokenBody())

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.ReadError):
        event_loop.run_until_complete(
            download_images(["https://images.example/a.png"], tmp_path, "dall-e-3", http_client=client)
        )

    assert os.listdir(tmp_path) == []


def test_interrupted_download_surfaces_as_generation_error(tmp_path, event_loop):
    def handler(request):
        return httpx.Response(200, stream=_BrokenBody())

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    assistant = ChatAssistant(client=FakeOpenAI(), config=chat_config(tmp_path / "images"), http_client=client)

    with pytest.raises(ImageGenerationError, match="connection reset"):
        event_loop.run_until_complete(assistant.generate_image("a kart"))

    assert os.listdir(tmp_path / "images") == []


def test_download_images_creates_directory(tmp_path, http_client, event_loop):
    target = tmp_path / "nested" / "dir"

    paths = event_loop.run_until_complete(
        download_images(["https://images.example/x.png"], target, "dall-e-2", http_client=http_client)
    )

    assert len(paths) == 1
    assert paths[0].startswith(str(target))
    assert target.is_dir()


# ------------------------------
# dispatcher
# ------------------------------

def test_chat_dispatcher_wraps_replies_as_text(assistant, event_loop):
    result = event_loop.run_until_complete(chat_dispatcher(assistant).invoke("ask_chatgpt", {"prompt": "hi"}))

    assert result.isError is False
    assert result.content[0].text == "use a quadtree"


def test_chat_dispatcher_reports_size_error(assistant, event_loop):
    result = event_loop.run_until_complete(
        chat_dispatcher(assistant).invoke("generate_image", {"prompt": "x", "size": "256x256"})
    )

    assert result.isError is True
    assert result.content[0].text == "Error: DALL-E 3 only supports sizes: 1024x1024, 1792x1024, 1024x1792"


def test_chat_dispatcher_reports_missing_argument(assistant, event_loop):
    result = event_loop.run_until_complete(
        chat_dispatcher(assistant).invoke("analyze_code", {"code": "x", "language": "python"})
    )

    assert result.isError is True
    assert result.content[0].text == "Error: Missing required argument: analysis_type"


def test_chat_dispatcher_float_max_tokens_is_coerced(assistant, openai_client, event_loop):
    event_loop.run_until_complete(
        chat_dispatcher(assistant).invoke("ask_chatgpt", {"prompt": "hi", "max_tokens": 50.0})
    )

    assert openai_client.completions.calls[0]["max_tokens"] == 50
    assert isinstance(openai_client.completions.calls[0]["max_tokens"], int)
