"""Users app package.

The user directory of ShareIt: a user is a display name plus a unique
e-mail. Other apps resolve user ids through ``apps.users.services``.
"""
