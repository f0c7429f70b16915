"""
Language Tagging Module

Maps file names to editor language tags and seed templates.
Everything here is a pure function of the file name.

Author: YSNRFD
Version: 1.0.0
"""

DEFAULT_LANGUAGE = 'text'

# Lower-cased extension -> editor language id
LANGUAGES: dict[str, str] = {
    'html': 'html',
    'htm': 'html',
    'css': 'css',
    'scss': 'scss',
    'js': 'javascript',
    'mjs': 'javascript',
    'jsx': 'javascript',
    'ts': 'typescript',
    'tsx': 'typescript',
    'json': 'json',
    'md': 'markdown',
    'py': 'python',
    'go': 'go',
    'rs': 'rust',
    'java': 'java',
    'kt': 'kotlin',
    'swift': 'swift',
    'cpp': 'cpp',
    'cc': 'cpp',
    'hpp': 'cpp',
    'c': 'c',
    'h': 'c',
    'cs': 'csharp',
    'php': 'php',
    'dart': 'dart',
    'lua': 'lua',
    'rb': 'ruby',
    'sh': 'shell',
    'sql': 'sql',
    'xml': 'xml',
    'yaml': 'yaml',
    'yml': 'yaml',
    'toml': 'toml',
    'txt': 'text',
}

TEMPLATES: dict[str, str] = {
    'html': """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>New Project</title>
    <style>
      body { font-family: sans-serif; padding: 20px; background: #f0f0f0; }
    </style>
</head>
<body>
    <h1>Hello World</h1>
    <script>
      console.log("App started");
    </script>
</body>
</html>""",
    'css': """body {
    margin: 0;
    padding: 0;
    font-family: system-ui, -apple-system, sans-serif;
}""",
    'js': "console.log('Hello from JavaScript!');",
    'ts': "const greeting: string = 'Hello TypeScript';\nconsole.log(greeting);",
    'json': '{\n  "name": "project",\n  "version": "1.0.0"\n}',
    'jsx': (
        "import React from 'react';\n\n"
        "export default function App() {\n  return <h1>Hello React</h1>;\n}"
    ),
    'tsx': (
        "import React from 'react';\n\n"
        "export default function App() {\n  return <h1>Hello React TS</h1>;\n}"
    ),
    'py': (
        '# Python Script\ndef main():\n    print("Hello from Python!")\n\n'
        'if __name__ == "__main__":\n    main()'
    ),
    'go': 'package main\n\nimport "fmt"\n\nfunc main() {\n    fmt.Println("Hello from Go!")\n}',
    'rs': 'fn main() {\n    println!("Hello from Rust!");\n}',
    'java': (
        'public class Main {\n    public static void main(String[] args) {\n'
        '        System.out.println("Hello from Java!");\n    }\n}'
    ),
    'cpp': (
        '#include <iostream>\n\nint main() {\n'
        '    std::cout << "Hello from C++!" << std::endl;\n    return 0;\n}'
    ),
    'c': '#include <stdio.h>\n\nint main() {\n    printf("Hello from C!\\n");\n    return 0;\n}',
    'php': '<?php\n\necho "Hello from PHP!";\n?>',
    'dart': "void main() {\n  print('Hello from Dart!');\n}",
    'lua': 'print("Hello from Lua!")',
}


def extension_of(name: str) -> str:
    """
    Get the lower-cased extension of a file name.

    Args:
        name: File name (not a path)

    Returns:
        Suffix after the last '.', or '' when the name has none
    """
    if '.' not in name:
        return ''
    return name.rsplit('.', 1)[1].lower()


def language_for(name: str) -> str:
    """Language tag for ``name``, ``'text'`` when the extension is unknown."""
    return LANGUAGES.get(extension_of(name), DEFAULT_LANGUAGE)


def template_for(name: str) -> str:
    """Seed content for a new file called ``name``."""
    return TEMPLATES.get(extension_of(name), '')
