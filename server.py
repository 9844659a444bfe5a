import sys

from flask import Flask, request, jsonify, send_from_directory
from flask_cors import CORS
import json
import os
import traceback

# Local stand-in for the Singlish translator site. It serves a page with the same
# input box and "Sinhala" output card, backed by a word-by-word dictionary lookup.

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PAGES_DIR = os.path.join(BASE_DIR, 'pages')
DICTIONARY_PATH = os.path.join(BASE_DIR, 'assets', 'dictionary.json')

app = Flask(__name__)
CORS(app)


def load_dictionary(path=DICTIONARY_PATH):
    """Load the Singlish -> Sinhala word map, empty if the file is missing."""
    if not os.path.exists(path):
        print(f"Warning: dictionary not found at {path}")
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


dictionary = load_dictionary()


def get_sinhala_word(word):
    # Unknown words pass through unchanged
    return dictionary.get(word.lower(), word)


def transliterate(text):
    lines = []
    for line in text.split('\n'):
        lines.append(' '.join(get_sinhala_word(word) for word in line.split()))
    return '\n'.join(lines)


@app.route('/')
def index():
    return send_from_directory(PAGES_DIR, 'index.html')


@app.route('/pages/<path:filename>')
def serve_pages(filename):
    return send_from_directory(PAGES_DIR, filename)


@app.route('/translate', methods=['POST'])
def translate():
    try:
        data = request.get_json(silent=True)

        if not data:
            print("Error: No data received")
            return jsonify({'error': 'No data received', 'status': 'error'}), 400

        text_input = data.get('text', '')
        if not text_input.strip():
            return jsonify({'error': 'No text provided', 'status': 'error'}), 400

        print(f"Translation request received: {text_input}")
        sinhala = transliterate(text_input)
        print(f"Sinhala: {sinhala}")

        return jsonify({
            'sinhala': sinhala,
            'status': 'completed'
        })

    except Exception as e:
        error_msg = f"Translation endpoint error: {str(e)}"
        print(error_msg)
        traceback.print_exc()
        return jsonify({'error': error_msg, 'status': 'error'}), 500


if __name__ == '__main__':
    # Sinhala text in the request log
    sys.stdout.reconfigure(encoding='utf-8', line_buffering=True)
    sys.stderr.reconfigure(encoding='utf-8')
    app.run(debug=True, port=5000)
