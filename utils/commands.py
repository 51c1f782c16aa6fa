"""
utils/commands.py
-----------------
Bot command names. Matching is by prefix, so "/start@FilesBot" is /start.
"""

START_COMMAND = "/start"
SET_LANGUAGE_COMMAND = "/setlanguage"
UPLOAD_COMMAND = "/upload"
CANCEL_COMMAND = "/cancel"
DELETE_COMMAND = "/delete"
LIST_COMMAND = "/list"

# Order of the placeholders in the "help" string.
HELP_COMMANDS = (START_COMMAND, UPLOAD_COMMAND, DELETE_COMMAND, LIST_COMMAND)
