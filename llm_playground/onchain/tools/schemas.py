"""Input schemas for the contract analysis tools."""
from typing import Literal

from pydantic import BaseModel, Field

AnalysisStage = Literal["data_collection", "data_analysis", "evaluation", "report_generation"]
DataType = Literal["social", "market", "onchain", "other"]


class FarcasterSearchInput(BaseModel):
    query: str = Field(..., description="Search text, e.g. a token name or contract address")


class ContractAddressInput(BaseModel):
    contract_address: str = Field(..., description="The Ethereum contract address to search for")


class UpdateProgressInput(BaseModel):
    stage: AnalysisStage = Field(..., description="Current stage of analysis")
    status: str = Field(..., description="Status message for this stage")


class RequestAdditionalDataInput(BaseModel):
    data_type: DataType = Field(..., description="Type of additional data needed")
    reason: str = Field(..., description="Why this additional data is needed")


class SocialDataInput(BaseModel):
    social_data: str = Field(..., description="Raw social data from Farcaster")


class MarketDataInput(BaseModel):
    market_data: str = Field(..., description="Raw market data from Coingecko")


class OnChainDataInput(BaseModel):
    on_chain_data: str = Field(..., description="Raw on-chain data from Etherscan")


class EvaluateOpportunityInput(BaseModel):
    social_analysis: str = Field(..., description="Analysis of social sentiment")
    market_analysis: str = Field(..., description="Analysis of market data")
    on_chain_analysis: str = Field(..., description="Analysis of on-chain data")


class GenerateReportInput(BaseModel):
    contract_address: str = Field(..., description="The analyzed Ethereum contract address")
    social_analysis: str = Field(..., description="Social sentiment analysis section")
    market_analysis: str = Field(..., description="Market analysis section")
    on_chain_analysis: str = Field(..., description="On-chain analysis section")
    opportunity_evaluation: str = Field(..., description="Final opportunity evaluation section")
