# File helpers shared by the test modules

import os


def write(root, rel_path, content):
    # Writes a working file, creating parent directories
    full_path = os.path.join(root, rel_path)
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    with open(full_path, 'w') as f:
        f.write(content)
    return full_path


def read(root, rel_path):
    with open(os.path.join(root, rel_path)) as f:
        return f.read()
