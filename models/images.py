from pydantic import BaseModel, Field

# Unsplash caps both per_page and count at 30
MAX_IMAGES = 30


class ImageSearchRequest(BaseModel):
    """Schema for POST /tools/get_images."""
    query: str = Field(..., min_length=1, description="Search terms for the images")
    per_page: int = Field(default=5, ge=1, le=MAX_IMAGES, alias="perPage", description="Number of images to return")

    class Config:
        populate_by_name = True


class RandomImageRequest(BaseModel):
    """Schema for POST /tools/get_random_images."""
    query: str = Field(..., min_length=1, description="Topic the random images should match")
    count: int = Field(default=5, ge=1, le=MAX_IMAGES, description="Number of images to return")


class ImageResult(BaseModel):
    """One search hit."""
    id: str
    url: str
    photographer: str
    description: str | None = None


class RandomImageResult(BaseModel):
    """One random image with its size variants."""
    id: str
    thumb_url: str = Field(..., alias="thumbUrl")
    preview_url: str = Field(..., alias="previewUrl")
    full_url: str = Field(..., alias="fullUrl")
    photographer: str
    photographer_profile: str = Field(..., alias="photographerProfile")
    description: str = "Unsplash Image"

    class Config:
        populate_by_name = True


class ImageSearchResponse(BaseModel):
    images: list[ImageResult]


class RandomImageResponse(BaseModel):
    images: list[RandomImageResult]
