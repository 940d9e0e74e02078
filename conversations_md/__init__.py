"""
conversations_md package

Converts a DeepSeek conversations.json export into one Markdown file per
conversation, keeping only the message categories you ask for.

To run (asks three y/n questions, reads ./conversations.json, writes
./conversationsMD/):

python -m conversations_md

Non-interactive:

python -m conversations_md data/conversations.json --out output/md --keep-user --keep-content

Sample result in CLI:

✓ Saved: Hello.md (2 nodes)
⚠ Skipped: Empty chat.md (no qualifying content)

========================================================================
✅ Done
========================================================================
Conversations: 2
Written:       1
"""
