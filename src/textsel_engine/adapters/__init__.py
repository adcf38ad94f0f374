"""Host adapters that embed the engine in terminal UIs."""
