# =============================================================================
# main.py  —  Interactive entry point for the NBP exchange-rate assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/nbp_agent.py), which spawns the
#      MCP tool server (tools/mcp_server.py) as a subprocess
#   2. Opens an in-memory session
#   3. Sends each question typed at the prompt to the agent
#   4. Prints the tool calls the agent makes and its final answer
#
# The MCP server itself can also run on its own:
#   uv run python -m tools.mcp_server --transport http
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY (and core.config the NBP_* settings)
# from the environment when they initialize.
load_dotenv()

from google.adk.runners import Runner  # noqa: E402
from google.adk.sessions import InMemorySessionService  # noqa: E402
from google.genai import types  # noqa: E402

from agent.nbp_agent import create_agent  # noqa: E402

APP_NAME = "nbp_exchange"
USER_ID = "demo_user"


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question through the runner; return the agent's last text part."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    final_response = ""

    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "text", None):
                final_response = part.text
            if getattr(part, "function_call", None):
                call = part.function_call
                print(f"  🔧 Calling tool: {call.name}({dict(call.args or {})})")

    return final_response


async def run_agent():
    """Run the assistant interactively until the user quits."""
    print("=" * 70)
    print("  NBP EXCHANGE RATE ASSISTANT")
    print("  Powered by Google ADK + FastMCP + api.nbp.pl")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about PLN exchange rates or the NBP gold price.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = await ask(runner, session.id, user_input)

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
