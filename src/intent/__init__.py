"""Intent classification and response payload schema.

The intent layer converts a free-text (Russian/English) query into a `Category` by keyword
matching. The payload schema is the contract between the response assembler and the bot renderers.
"""
