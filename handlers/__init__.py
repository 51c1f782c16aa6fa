"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
converts them into transport-independent messages and hands them to the
FileDispatcher. No business logic lives here.
"""
