"""NiceGUI interface - presentation layer for both front-ends.

Pages:
    - /login: Demo sign-in stub
    - /: Chat with sessions sidebar, typewriter reveal and stop button
    - /content: Chat with a YouTube transcript, PDF or pasted text

Pages drive a per-tab ConversationEngine directly. Importing a page module
registers its route.
"""
