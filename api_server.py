#!/usr/bin/env python3
"""Simple API server for parsing pasted recipe text."""

from flask import Flask, request, jsonify
import os
from dotenv import load_dotenv

from recipe_text.draft_validator import review_draft
from recipe_text.engine import parse_recipe_batch, parse_recipe_text

load_dotenv()

MAX_TEXT_LENGTH = int(os.getenv('MAX_TEXT_LENGTH', 100000))

app = Flask(__name__)


def get_request_text():
    """Pull recipe text from a JSON body or form field.

    Returns:
        (text, error_response) - exactly one of them is None
    """
    data = request.get_json(silent=True) or {}
    text = data.get('text') if isinstance(data, dict) else None
    if text is None:
        text = request.form.get('text')

    if not isinstance(text, str) or not text.strip():
        return None, (jsonify({'error': 'No recipe text provided'}), 400)

    if len(text) > MAX_TEXT_LENGTH:
        return None, (jsonify({'error': f'Text too long (max {MAX_TEXT_LENGTH} characters)'}), 413)

    return text, None


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({'status': 'ok'})


@app.route('/parse', methods=['POST'])
def parse():
    """Parse one pasted recipe into a draft plus review warnings."""
    text, error = get_request_text()
    if error:
        return error

    draft = parse_recipe_text(text)
    if draft is None:
        return jsonify({'error': 'No recipe text provided'}), 400

    return jsonify({
        'recipe': draft.to_dict(),
        'warnings': review_draft(draft),
    })


@app.route('/parse-batch', methods=['POST'])
def parse_batch():
    """Parse several recipes separated by --RECIPE BREAK-- markers."""
    text, error = get_request_text()
    if error:
        return error

    drafts = parse_recipe_batch(text)
    return jsonify({
        'recipes': [draft.to_dict() for draft in drafts],
        'count': len(drafts),
    })


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5001))
    print(f"Recipe text parser listening on port {port}")
    app.run(host='0.0.0.0', port=port, debug=False)
