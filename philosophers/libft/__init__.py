"""Character, memory, string, text and file-descriptor output helpers."""