"""Review the current branch's git diff with a chat-completion model."""
