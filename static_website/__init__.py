"""CDK static website on S3, CloudFront, Route 53 and ACM."""
