"""
Seed Script: JSON to blog_posts
Inserts blog posts from a JSON file (a list of post objects, camelCase keys
as served by /api/blog-posts). Posts whose slug already exists are skipped.

Usage:
    python migrations/seed_blog_posts.py [posts.json]
"""

import os
import sys
import json

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from utils.data import create_blog_post
from utils.errors import ConflictError, ValidationError


def seed_posts(posts):
    """
    Insert each post, skipping duplicates and reporting invalid entries

    Returns:
        dict: counts of created, skipped and invalid posts
    """
    counts = {'created': 0, 'skipped': 0, 'invalid': 0}
    for index, post_data in enumerate(posts):
        slug = post_data.get('slug', f'#{index}') if isinstance(post_data, dict) else f'#{index}'
        try:
            create_blog_post(post_data)
        except ConflictError:
            print(f"  [SKIP] {slug}: slug already exists")
            counts['skipped'] += 1
        except ValidationError as e:
            problems = '; '.join(f"{f['field']}: {f['message']}" for f in e.fields)
            print(f"  [INVALID] {slug}: {problems}")
            counts['invalid'] += 1
        else:
            print(f"  [OK] {slug}")
            counts['created'] += 1
    return counts


def main(argv=None):
    """Main seed function"""
    argv = sys.argv[1:] if argv is None else argv
    json_file = argv[0] if argv else 'posts.json'

    print("=" * 60)
    print("Blog Post Seed Script")
    print("=" * 60)

    if not os.path.exists(json_file):
        print(f"Error: {json_file} not found!")
        return 1

    print(f"\nLoading posts from {json_file}...")
    with open(json_file, 'r', encoding='utf-8') as f:
        posts = json.load(f)

    if not isinstance(posts, list):
        print("Error: expected a JSON list of posts")
        return 1

    # Create app and context
    app = create_app()
    with app.app_context():
        counts = seed_posts(posts)

    print("\n" + "=" * 60)
    print(f"Created: {counts['created']}  Skipped: {counts['skipped']}  Invalid: {counts['invalid']}")
    print("=" * 60)
    return 0 if counts['invalid'] == 0 else 1


if __name__ == '__main__':
    sys.exit(main())
