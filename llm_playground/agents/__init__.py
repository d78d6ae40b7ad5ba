"""Tool-calling agents: Tavily search agents, OpenAI web search and the reflection agent."""
