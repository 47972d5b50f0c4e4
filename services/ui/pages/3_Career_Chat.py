from ui_lib.state.session import ensure
from ui_lib.components.chat import render_chat

ensure()
render_chat()
