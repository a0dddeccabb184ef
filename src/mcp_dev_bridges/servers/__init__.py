"""stdio entry points for the browser bridge and the chat assistant."""
