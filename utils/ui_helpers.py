"""
UI Helper Functions for the single-page portfolio
=================================================

Presentation-only defaults: the section list, the page body class and the
sample blog posts shown while no posts exist. Nothing here is written to
or read from the database, and none of it is returned by the JSON API.
"""

from typing import Any, Dict, List, Optional


# Sections of the page, in scroll order: (anchor id, nav label)
NAV_SECTIONS = [
    ('hero', 'Home'),
    ('about', 'About'),
    ('projects', 'Projects'),
    ('blog', 'Blog'),
    ('contact', 'Contact'),
]

DEFAULT_THEME = 'light'
THEMES = ('light', 'dark')


# Illustrative posts for an empty blog, same shape as blog_post_to_dict()
SAMPLE_BLOG_POSTS: List[Dict[str, Any]] = [
    {
        'id': 1,
        'title': 'Advanced React Hooks: Custom Hooks for Complex State Management',
        'slug': 'advanced-react-hooks',
        'excerpt': 'Learn how to create powerful custom hooks that simplify complex state '
                   'logic and make your React components more maintainable...',
        'content': '',
        'category': 'React',
        'tags': ['React', 'Hooks'],
        'imageUrl': 'https://images.unsplash.com/photo-1633356122544-f134324a6cee'
                    '?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300',
        'published': True,
        'readTime': 5,
        'createdAt': '2023-12-15T00:00:00',
        'updatedAt': '2023-12-15T00:00:00',
    },
    {
        'id': 2,
        'title': 'Node.js Performance Optimization: From Basics to Advanced Techniques',
        'slug': 'nodejs-performance-optimization',
        'excerpt': 'Comprehensive guide to optimizing Node.js applications for production, '
                   'covering caching, clustering, and memory management...',
        'content': '',
        'category': 'Node.js',
        'tags': ['Node.js', 'Performance'],
        'imageUrl': 'https://images.unsplash.com/photo-1558494949-ef010cbdcc31'
                    '?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300',
        'published': True,
        'readTime': 7,
        'createdAt': '2023-12-12T00:00:00',
        'updatedAt': '2023-12-12T00:00:00',
    },
    {
        'id': 3,
        'title': 'NextJS 14: New Features and Migration Best Practices',
        'slug': 'nextjs-14-features',
        'excerpt': 'Exploring the latest features in NextJS 14 and practical strategies '
                   'for upgrading your existing applications...',
        'content': '',
        'category': 'NextJS',
        'tags': ['NextJS', 'Migration'],
        'imageUrl': 'https://images.unsplash.com/photo-1581291518857-4e27b48ff24e'
                    '?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=300',
        'published': True,
        'readTime': 6,
        'createdAt': '2023-12-10T00:00:00',
        'updatedAt': '2023-12-10T00:00:00',
    },
]


def get_blog_preview(posts: List[Dict[str, Any]], limit: int = 3) -> List[Dict[str, Any]]:
    """
    Posts for the blog section of the page.

    Args:
        posts: serialized posts from the data layer
        limit: size of the preview slice

    Returns:
        list: the first `limit` posts, or copies of the sample posts when
        `posts` is empty
    """
    if posts:
        return posts[:limit]
    return [{**post, 'tags': list(post['tags'])} for post in SAMPLE_BLOG_POSTS]


def get_theme(requested: Optional[str]) -> str:
    """Theme for this page view; unknown values fall back to the default"""
    if requested in THEMES:
        return requested
    return DEFAULT_THEME


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the <body> of the current page

    Example:
        >>> get_page_specific_class('pages', 'index')
        'page-pages page-pages-index'
    """
    if not blueprint_name:
        return ''

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


__all__ = [
    'NAV_SECTIONS',
    'SAMPLE_BLOG_POSTS',
    'get_blog_preview',
    'get_theme',
    'get_page_specific_class'
]
