"""
Simple usage example for rulebot

Shows the resolver on its own, without the interactive CLI.
"""

from rulebot import KnowledgeBase, ResponseResolver


def main():
    print("=" * 60)
    print("rulebot Simple Example")
    print("=" * 60)
    print()

    resolver = ResponseResolver(KnowledgeBase.build())

    # Exact, keyword and fallback replies
    for text in ["Hello", "  what is your name  ", "time", "so, what time is it?", "xyzzy"]:
        match = resolver.match(text)
        print(f"You: {text}")
        print(f"Bot: {match.response}   [{match.stage}]")
        print()

    print("=" * 60)
    print("\n💡 To chat interactively: rulebot  (or: python -m rulebot)")
    print("=" * 60)


if __name__ == "__main__":
    main()
