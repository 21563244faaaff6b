"""NiceGUI chat page driven by a ConversationTurnManager."""

from nicegui import ui

from gemini_chatbox.agent.chat_agent import get_agent_service
from gemini_chatbox.conversation import ConversationTurnManager
from gemini_chatbox.models import Message

PAGE_TITLE = "Gemini Chatbox"
INPUT_PLACEHOLDER = "Type your message..."

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; }

    .message-user {
        background: #1f2937;
        color: white;
        border-radius: 12px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 12px;
    }

    .avatar { background: #e5e7eb; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #6b7280;
        border-radius: 50%;
        animation: pulse 1.2s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.4s; }
    .typing-dot:nth-child(3) { animation-delay: 0.8s; }

    @keyframes pulse {
        0%, 100% { opacity: 0.3; }
        50% { opacity: 1; }
    }

    .message-assistant p { margin: 0; }
</style>
"""


@ui.page("/", title=PAGE_TITLE)
def chat_page() -> None:
    """Main chat page.

    Each visit gets its own conversation; the agent service is shared.
    """
    ui.add_head_html(CUSTOM_CSS)
    agent_service = get_agent_service()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    empty_state: ui.column
    input_field: ui.input
    send_btn: ui.button
    loading_row: ui.row | None = None

    def render_avatar(is_user: bool) -> None:
        icon = "person" if is_user else "smart_toy"
        with ui.element("div").classes(
            "avatar w-9 h-9 rounded-full flex items-center justify-center"
        ):
            ui.icon(icon).classes("text-gray-600 text-lg")

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.is_user else "justify-start"
        bubble = "message-user" if msg.is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-2 items-start no-wrap"):
            if not msg.is_user:
                render_avatar(False)
            with ui.element("div").classes(f"px-3 py-3 max-w-[80%] {bubble}"):
                if msg.is_user:
                    ui.label(msg.content).classes("text-sm whitespace-pre-wrap")
                else:
                    # Gemini replies usually contain markdown; the stored content stays raw
                    ui.markdown(msg.content).classes("text-sm")
            if msg.is_user:
                render_avatar(True)

    def render_loading_indicator() -> ui.row:
        with ui.row().classes("w-full justify-start gap-2 items-start") as row:
            render_avatar(False)
            with ui.element("div").classes("message-assistant px-3 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")
        return row

    def on_message(msg: Message) -> None:
        empty_state.set_visibility(False)
        with messages_container:
            render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    def on_busy_change(busy: bool) -> None:
        nonlocal loading_row
        if busy:
            send_btn.disable()
            with messages_container:
                loading_row = render_loading_indicator()
            scroll_area.scroll_to(percent=1.0)
        else:
            if loading_row is not None:
                loading_row.delete()
                loading_row = None
            send_btn.enable()

    conversation = ConversationTurnManager(
        agent_service,
        timeout=agent_service.config.request_timeout,
        on_message=on_message,
        on_busy_change=on_busy_change,
    )

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or conversation.busy:
            return
        input_field.value = ""
        await conversation.submit(text)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto p-4 gap-4"):
        ui.label(PAGE_TITLE).classes("w-full text-3xl font-bold text-center mb-4")

        with ui.card().classes("w-full p-4"):
            with ui.scroll_area().classes("w-full h-[500px]") as scroll_area:
                messages_container = ui.column().classes("w-full gap-4")
                with messages_container:
                    with ui.column().classes(
                        "w-full h-64 items-center justify-center gap-3"
                    ) as empty_state:
                        ui.icon("forum").classes("text-5xl text-gray-300")
                        ui.label("Start a conversation").classes("text-lg text-gray-400")

            with ui.row().classes("w-full gap-2 items-center no-wrap"):
                input_field = (
                    ui.input(placeholder=INPUT_PLACEHOLDER)
                    .props("outlined dense")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button("Send", on_click=send_message)
