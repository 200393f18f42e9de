"""Static catalog of the models infiniax serves, as listed on infiniax.ai."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    name: str
    provider: str
    description: str

    @property
    def owned_by(self) -> str:
        return re.sub(r"\s+", "-", self.provider.lower())


INFINIAX_MODELS: tuple[ModelDescriptor, ...] = (
    # Featured free models
    ModelDescriptor("meta-llama/llama-3.3-70b-instruct:free", "Llama 3.3 70B", "Meta", "FREE - High quality open-source"),
    ModelDescriptor("amazon/nova-2-lite-v1:free", "Nova 2 Lite", "Amazon", "FREE - Fast and efficient"),
    ModelDescriptor("arcee-ai/trinity-mini:free", "Trinity Mini", "Arcee AI", "FREE - Compact reasoning model"),
    ModelDescriptor("deepseek/deepseek-v3.2-exp", "DeepSeek 3.2 Exp", "DeepSeek", "FREE - Next-gen experimental"),
    ModelDescriptor("mistralai/ministral-14b-2512", "Mistral 14B", "Mistral AI", "FREE - Fast European AI"),
    ModelDescriptor("z-ai/glm-4.6v", "GLM 4.6v", "Z.ai", "FREE - Advanced reasoning"),
    # Premium models
    ModelDescriptor("anthropic/claude-opus-4.5", "Claude Opus 4.5", "Anthropic", "PREMIUM - Advanced Coding & Writing"),
    ModelDescriptor("google/gemini-3-pro-preview", "Gemini 3 Pro", "Google", "PREMIUM - Peak Intelligence"),
    ModelDescriptor("openai/gpt-5-pro", "GPT-5 Pro", "OpenAI", "PREMIUM - Most Expensive, Best output"),
    # OpenAI
    ModelDescriptor("openai/gpt-5.1", "GPT-5.1", "OpenAI", "FREE - Enhanced GPT-5 model"),
    ModelDescriptor("openai/gpt-5.1-chat", "GPT-5.1 Chat", "OpenAI", "FREE - Optimized for conversations"),
    ModelDescriptor("openai/gpt-5.1-codex-max", "GPT-5.1 Codex Max", "OpenAI", "FREE - Advanced reasoning for large tasks"),
    ModelDescriptor("openai/gpt-5", "GPT-5", "OpenAI", "FREE - Next-generation flagship model"),
    ModelDescriptor("openai/gpt-5-mini", "GPT-5 Mini", "OpenAI", "FREE - Fast and efficient GPT-5"),
    ModelDescriptor("openai/gpt-5-nano", "GPT-5 Nano", "OpenAI", "FREE - Ultra-lightweight GPT-5"),
    ModelDescriptor("openai/gpt-4o", "GPT-4o", "OpenAI", "FREE - Multimodal GPT-4 optimized"),
    ModelDescriptor("openai/gpt-4-turbo", "GPT-4 Turbo", "OpenAI", "FREE - Previous generation flagship"),
    ModelDescriptor("openai/gpt-3.5-turbo", "GPT-3.5 Turbo", "OpenAI", "FREE - Fast and economical"),
    # Anthropic
    ModelDescriptor("anthropic/claude-opus-4.1", "Claude Opus 4.1", "Anthropic", "FREE - Most capable Claude model"),
    ModelDescriptor("anthropic/claude-sonnet-4", "Claude Sonnet 4", "Anthropic", "FREE - Balanced performance and speed"),
    ModelDescriptor("anthropic/claude-haiku-4.5", "Claude Haiku 4.5", "Anthropic", "FREE - Lightning-fast responses"),
    ModelDescriptor("anthropic/claude-sonnet-4.5", "Claude Sonnet 4.5", "Anthropic", "FREE - Advanced reasoning and coding"),
    ModelDescriptor("anthropic/claude-3.7-sonnet", "Claude 3.7 Sonnet", "Anthropic", "FREE - Enhanced Claude 3 generation"),
    ModelDescriptor("anthropic/claude-3.5-haiku", "Claude 3.5 Haiku", "Anthropic", "FREE - Fast and efficient Claude"),
    ModelDescriptor("anthropic/claude-3-opus", "Claude 3 Opus", "Anthropic", "FREE - Most capable Claude model"),
    # Google
    ModelDescriptor("google/gemini-2.5-pro", "Gemini 2.5 Pro", "Google", "FREE - Advanced multimodal"),
    ModelDescriptor("google/gemini-2.5-flash", "Gemini 2.5 Flash", "Google", "FREE - Fast multimodal AI"),
    ModelDescriptor("google/gemini-flash-1.5", "Gemini 1.5 Flash", "Google", "FREE - Efficient multimodal model"),
    # X.AI
    ModelDescriptor("x-ai/grok-4", "Grok 4", "X.AI", "FREE - Most capable Grok model"),
    ModelDescriptor("x-ai/grok-4-fast", "Grok 4 Fast", "X.AI", "FREE - Lightning-fast Grok"),
    ModelDescriptor("x-ai/grok-4.1-fast", "Grok 4.1 Fast", "X.AI", "FREE - Lightning-fast Grok"),
    ModelDescriptor("x-ai/grok-4.1-fast:reasoning", "Grok 4.1 Fast Reasoning", "X.AI", "FREE - Enhanced reasoning mode"),
    ModelDescriptor("x-ai/grok-code-fast-1", "Grok Code Fast", "X.AI", "FREE - Specialized for coding"),
    # Meta
    ModelDescriptor("meta-llama/llama-4-scout", "Llama 4 Scout", "Meta", "FREE - Fast and efficient Llama 4"),
    ModelDescriptor("meta-llama/llama-4-maverick", "Llama 4 Maverick", "Meta", "FREE - Advanced Llama 4 model"),
    # DeepSeek
    ModelDescriptor("deepseek/deepseek-v3.1-terminus", "DeepSeek 3.1 Terminus", "DeepSeek", "FREE - Advanced reasoning model"),
    ModelDescriptor("deepseek/deepseek-chat", "DeepSeek Chat", "DeepSeek", "FREE - Efficient reasoning"),
    # Qwen
    ModelDescriptor("qwen/qwen3-max", "Qwen 3 Max", "Qwen", "FREE - Top-tier reasoning model"),
    ModelDescriptor("qwen/qwen3-coder-plus", "Qwen 3 Coder Plus", "Qwen", "FREE - Advanced coding model"),
    ModelDescriptor("qwen/qwen3-coder-flash", "Qwen 3 Coder Flash", "Qwen", "FREE - Fast coding assistant"),
    ModelDescriptor("qwen/qwen-2.5-72b-instruct", "Qwen 2.5 72B", "Qwen", "FREE - Multilingual excellence"),
    ModelDescriptor("qwen/qwen-turbo", "Qwen Turbo", "Qwen", "FREE - Ultra-fast responses"),
    # Mistral
    ModelDescriptor("mistralai/mistral-large", "Mistral Large", "Mistral AI", "FREE - European flagship model"),
    ModelDescriptor("mistralai/mistral-medium-3.1", "Mistral Medium", "Mistral AI", "FREE - Balanced capabilities"),
    # Other
    ModelDescriptor("minimax/minimax-m2", "Minimax M2", "Minimax", "FREE - Advanced reasoning model"),
    ModelDescriptor("moonshotai/kimi-k2-thinking", "Moonshot Kimi K2", "Moonshot", "FREE - Deep thinking capabilities"),
    ModelDescriptor("microsoft/phi-3-medium-128k-instruct", "Phi-3 Medium", "Microsoft", "FREE - Compact and capable"),
    ModelDescriptor("cohere/command-r-plus-08-2024", "Command R+", "Cohere", "FREE - Enterprise-grade RAG"),
    ModelDescriptor("z-ai/glm-4.6", "GLM 4.6", "Z.ai", "FREE - Advanced reasoning model"),
    ModelDescriptor("z-ai/glm-4.6:exacto", "GLM 4.6 Exacto", "Z.ai", "FREE - Optimized precision model"),
)
