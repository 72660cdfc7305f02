"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Sidebar with chat sessions, dark-mode toggle, history clearing
      and language selection
    - Message list with a "Thinking..." indicator while a reply is pending
    - Input form wired to the chat controller

Renders ChatController snapshots and forwards events back to the
controller. Contains no chat logic of its own.
"""
