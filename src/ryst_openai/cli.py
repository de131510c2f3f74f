"""``ryst`` command line entrypoint: one completion or chat completion per run."""
import argparse
import asyncio
import json
import sys

from ryst_openai.chat_completion import ChatCompletionRequest, ChatCompletionResponse, Message
from ryst_openai.completion import CompletionRequest, CompletionResponse
from ryst_openai.config import OpenAISettings
from ryst_openai.errors import OpenAIError
from ryst_openai.logging import configure_logging


def parse_message(value: str) -> Message:
    """Parse ``ROLE:CONTENT``; content may itself contain colons."""
    role, sep, content = value.partition(":")
    if not sep or not role:
        raise argparse.ArgumentTypeError(f"expected ROLE:CONTENT, got {value!r}")
    return Message(role=role.strip(), content=content)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--model", required=True)
    parser.add_argument("--max-tokens", type=int, default=None)
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument("--top-p", type=float, default=None)
    parser.add_argument("-n", type=int, default=None)
    parser.add_argument("--stop", action="append", default=None, help="Stop sequence (repeatable)")
    parser.add_argument("--presence-penalty", type=float, default=None)
    parser.add_argument("--frequency-penalty", type=float, default=None)
    parser.add_argument("--user", default=None)
    parser.add_argument("--stream", action="store_true")
    parser.add_argument("--json", action="store_true", help="Print the full response as JSON")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ryst", description="OpenAI completions from the command line")
    p.add_argument("--json-logs", action="store_true")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_complete = sub.add_parser("complete", help="Run a text completion")
    _add_common_options(p_complete)
    p_complete.add_argument("--prompt", required=True)
    p_complete.add_argument("--suffix", default=None)
    p_complete.add_argument("--logprobs", type=int, default=None)
    p_complete.add_argument("--echo", action="store_true", default=None)
    p_complete.add_argument("--best-of", type=int, default=None)

    p_chat = sub.add_parser("chat", help="Run a chat completion")
    _add_common_options(p_chat)
    p_chat.add_argument(
        "--message",
        dest="messages",
        action="append",
        type=parse_message,
        required=True,
        help="ROLE:CONTENT (repeatable, in conversation order)",
    )
    return p


def build_request(args: argparse.Namespace) -> CompletionRequest | ChatCompletionRequest:
    request: CompletionRequest | ChatCompletionRequest
    if args.cmd == "complete":
        request = CompletionRequest(
            model=args.model,
            prompt=args.prompt,
            suffix=args.suffix,
            logprobs=args.logprobs,
            echo=args.echo,
            best_of=args.best_of,
        )
    else:
        request = ChatCompletionRequest(model=args.model, messages=args.messages)
    request.max_tokens = args.max_tokens
    request.temperature = args.temperature
    request.top_p = args.top_p
    request.n = args.n
    request.stop = args.stop
    request.presence_penalty = args.presence_penalty
    request.frequency_penalty = args.frequency_penalty
    request.user = args.user
    return request


def format_response(response: CompletionResponse | ChatCompletionResponse, as_json: bool) -> str:
    if as_json:
        return json.dumps(response.model_dump(mode="json"), indent=2, ensure_ascii=False)
    if isinstance(response, CompletionResponse):
        return "\n".join(choice.text for choice in response.choices)
    return "\n".join(choice.message.content for choice in response.choices)


async def run(args: argparse.Namespace, settings: OpenAISettings | None = None) -> int:
    request = build_request(args)
    try:
        if args.stream:
            async with await request.stream(settings) as stream:
                response = await stream.next()
        else:
            response = await request.submit(settings)
    except OpenAIError as e:
        print(str(e).rstrip(), file=sys.stderr)
        return 1
    if response is not None:
        print(format_response(response, args.json))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(json_logs=args.json_logs, level=args.log_level)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
