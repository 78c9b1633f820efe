"""Sandboxed document browser.

The FileStore in ``docbrowser.use_cases.files.file_store`` owns the listing of
the current directory and performs every file change; the API, CLI and
desktop window are thin surfaces over it.
"""
